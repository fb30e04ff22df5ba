import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront_nav.api.router import api_router
from storefront_nav.core.config import settings
from storefront_nav.core.logging import configure_logging, ensure_request_id, request_id_ctx_var, request_path_ctx_var
from storefront_nav.db.session import init_db

configure_logging(settings.log_level, settings.log_json)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    logger.info("Database ready", extra={"environment": settings.environment})
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

RATE_LIMIT_WINDOW_S = 60

_rate_limit_store: dict[str, list[float]] = {}


def _over_rate_limit(client_ip: str, now: float) -> bool:
    for ip in list(_rate_limit_store):
        recent = [t for t in _rate_limit_store[ip] if now - t < RATE_LIMIT_WINDOW_S]
        if recent:
            _rate_limit_store[ip] = recent
        else:
            del _rate_limit_store[ip]
    history = _rate_limit_store.get(client_ip, [])
    if len(history) >= settings.rate_limit_per_min:
        return True
    _rate_limit_store[client_ip] = history + [now]
    return False


@app.middleware("http")
async def bind_request_context(request: Request, call_next):
    request_id = ensure_request_id(request.headers.get("X-Request-ID"))
    request_id_ctx_var.set(request_id)
    request_path_ctx_var.set(request.url.path)
    if settings.environment.lower() == "prod":
        client_ip = request.client.host if request.client else "unknown"
        if _over_rate_limit(client_ip, time.time()):
            logger.warning("Rate limit exceeded", extra={"client_ip": client_ip})
            return JSONResponse(status_code=429, content={"detail": "Rate limit exceeded"}, headers={"X-Request-ID": request_id})
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
