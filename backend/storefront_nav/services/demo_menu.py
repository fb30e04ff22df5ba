import logging
from sqlalchemy.orm import Session
from storefront_nav.models import Menu, Section
from storefront_nav.services.section_source import get_menu

logger = logging.getLogger(__name__)

DEMO_LINKS: list[tuple[str, str, list[tuple[str, str]]]] = [
    ("Home", "/", []),
    ("Catalog", "/collections/all", [("Shoes", "/collections/shoes"), ("Bags", "/collections/bags")]),
    ("About", "/pages/about", []),
    ("Contact", "/pages/contact", []),
]


def seed_demo_menu(db: Session, handle: str = "main-menu") -> Menu:
    menu = get_menu(db, handle)
    if menu:
        return menu
    menu = Menu(handle=handle, title="Main menu")
    db.add(menu)
    db.flush()

    sort_order = 0
    for title, url, children in DEMO_LINKS:
        parent = Section(menu_id=menu.id, title=title, url=url, sort_order=sort_order)
        db.add(parent)
        db.flush()
        sort_order += 1
        for child_title, child_url in children:
            db.add(Section(menu_id=menu.id, parent_id=parent.id, title=child_title, url=child_url, sort_order=sort_order))
            sort_order += 1
    db.commit()
    db.refresh(menu)
    logger.info("Demo menu seeded", extra={"menu_id": menu.id, "handle": handle})
    return menu
