import sys
import httpx

base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8000"
handle = sys.argv[2] if len(sys.argv) > 2 else "main-menu"

resp = httpx.get(f"{base_url}/health", timeout=5)
resp.raise_for_status()
print("health:", resp.json())

resp = httpx.get(f"{base_url}/menus/{handle}/navigation.html", params={"path": "/"}, timeout=5)
resp.raise_for_status()
print(resp.text)
