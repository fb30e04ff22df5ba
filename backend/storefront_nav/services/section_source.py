import logging
from sqlalchemy.orm import Session
from storefront_nav.models import Menu, Section
from storefront_nav.services.navigation import SectionRecord

logger = logging.getLogger(__name__)


def get_menu(db: Session, handle: str) -> Menu | None:
    return db.query(Menu).filter(Menu.handle == handle).first()


def load_sections(db: Session, menu: Menu) -> list[SectionRecord]:
    rows = (
        db.query(Section)
        .filter(Section.menu_id == menu.id)
        .order_by(Section.sort_order.asc(), Section.id.asc())
        .all()
    )
    records = [to_record(row) for row in rows]
    logger.debug("Sections loaded", extra={"menu_id": menu.id, "count": len(records)})
    return records


def to_record(section: Section) -> SectionRecord:
    return SectionRecord(id=section.id, title=section.title, url=section.url, parent_id=section.parent_id)
