import sys
from storefront_nav.core.config import settings
from storefront_nav.core.logging import configure_logging
from storefront_nav.db.session import SessionLocal, init_db
from storefront_nav.services.demo_menu import seed_demo_menu


def main() -> None:
    configure_logging(settings.log_level, settings.log_json)
    handle = sys.argv[1] if len(sys.argv) > 1 else "main-menu"
    init_db()
    db = SessionLocal()
    try:
        menu = seed_demo_menu(db, handle)
        print(f"Menu '{menu.handle}' has {len(menu.sections)} sections")
    finally:
        db.close()


if __name__ == "__main__":
    main()
