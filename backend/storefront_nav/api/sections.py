import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session
from storefront_nav.db.session import get_db
from storefront_nav.models import Section
from storefront_nav.schemas.section import SectionCreate, SectionOut, SectionUpdate
from storefront_nav.services.section_source import get_menu

logger = logging.getLogger(__name__)

router = APIRouter()


def _collect_descendants(section: Section) -> list[Section]:
    nodes = [section]
    result = []
    while nodes:
        node = nodes.pop(0)
        result.append(node)
        nodes.extend(node.children)
    return result


def _check_parent(db: Session, menu_id: int, parent_id: int, sort_order: int, section: Section | None = None) -> None:
    parent = db.get(Section, parent_id)
    if not parent or parent.menu_id != menu_id:
        raise HTTPException(status_code=400, detail="Parent section must belong to the same menu")
    if section and parent.id in {node.id for node in _collect_descendants(section)}:
        raise HTTPException(status_code=400, detail="Section cannot be nested under itself")
    # A child nests only under a parent rendered before it; a new section gets the highest id.
    if section is None:
        follows = parent.sort_order <= sort_order
    else:
        follows = (parent.sort_order, parent.id) < (sort_order, section.id)
    if not follows:
        raise HTTPException(status_code=400, detail="Section must be ordered after its parent")


def _check_children_follow(section: Section, sort_order: int) -> None:
    for child in section.children:
        if (child.sort_order, child.id) <= (sort_order, section.id):
            raise HTTPException(status_code=400, detail="Section must be ordered before its children")


def _clean(value: str, field: str, max_length: int) -> str:
    value = value.strip()
    if not value:
        raise HTTPException(status_code=400, detail=f"{field} cannot be empty")
    if len(value) > max_length:
        raise HTTPException(status_code=400, detail=f"{field} is too long")
    return value


@router.get("/menus/{handle}/sections", response_model=list[SectionOut])
def list_menu_sections(handle: str, db: Session = Depends(get_db)):
    menu = get_menu(db, handle)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    return (
        db.query(Section)
        .filter(Section.menu_id == menu.id)
        .order_by(Section.sort_order.asc(), Section.id.asc())
        .all()
    )


@router.post("/menus/{handle}/sections", response_model=SectionOut)
def create_section(handle: str, payload: SectionCreate, db: Session = Depends(get_db)):
    menu = get_menu(db, handle)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    title = _clean(payload.title, "Title", 255)
    url = _clean(payload.url, "Url", 1024)
    sort_order = payload.sort_order
    if sort_order is None:
        last = db.query(func.max(Section.sort_order)).filter(Section.menu_id == menu.id).scalar()
        sort_order = 0 if last is None else last + 1
    if payload.parent_id is not None:
        _check_parent(db, menu.id, payload.parent_id, sort_order)
    section = Section(menu_id=menu.id, parent_id=payload.parent_id, title=title, url=url, sort_order=sort_order)
    db.add(section)
    db.commit()
    db.refresh(section)
    logger.info("Section created", extra={"menu_id": menu.id, "section_id": section.id})
    return section


@router.get("/sections/{section_id}", response_model=SectionOut)
def get_section(section_id: int, db: Session = Depends(get_db)):
    section = db.get(Section, section_id)
    if not section:
        raise HTTPException(status_code=404, detail="Section not found")
    return section


@router.put("/sections/{section_id}", response_model=SectionOut)
def update_section(section_id: int, payload: SectionUpdate, db: Session = Depends(get_db)):
    section = db.get(Section, section_id)
    if not section:
        raise HTTPException(status_code=404, detail="Section not found")
    changes = payload.model_dump(exclude_unset=True)
    title = section.title if changes.get("title") is None else _clean(changes["title"], "Title", 255)
    url = section.url if changes.get("url") is None else _clean(changes["url"], "Url", 1024)
    sort_order = section.sort_order if changes.get("sort_order") is None else changes["sort_order"]
    parent_id = changes["parent_id"] if "parent_id" in changes else section.parent_id
    if parent_id is not None:
        _check_parent(db, section.menu_id, parent_id, sort_order, section)
    if sort_order != section.sort_order:
        _check_children_follow(section, sort_order)
    section.title = title
    section.url = url
    section.sort_order = sort_order
    section.parent_id = parent_id
    db.commit()
    db.refresh(section)
    return section


@router.delete("/sections/{section_id}")
def delete_section(section_id: int, db: Session = Depends(get_db)):
    section = db.get(Section, section_id)
    if not section:
        raise HTTPException(status_code=404, detail="Section not found")
    removed = len(_collect_descendants(section))
    db.delete(section)
    db.commit()
    logger.info("Section deleted", extra={"section_id": section_id, "removed": removed})
    return {"status": "deleted", "removed": removed}
