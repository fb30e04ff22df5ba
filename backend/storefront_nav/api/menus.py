import logging
import re
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from storefront_nav.db.session import get_db
from storefront_nav.models import Menu
from storefront_nav.schemas.menu import MenuCreate, MenuOut, MenuUpdate
from storefront_nav.services.section_source import get_menu

logger = logging.getLogger(__name__)

router = APIRouter()

HANDLE_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


@router.post("/menus", response_model=MenuOut)
def create_menu(payload: MenuCreate, db: Session = Depends(get_db)):
    handle = payload.handle.strip()
    title = payload.title.strip()
    if not HANDLE_PATTERN.match(handle) or len(handle) > 64:
        raise HTTPException(status_code=400, detail="Handle must be lowercase letters, digits and dashes")
    if not title:
        raise HTTPException(status_code=400, detail="Title cannot be empty")
    if get_menu(db, handle):
        raise HTTPException(status_code=409, detail="Menu handle already exists")
    menu = Menu(handle=handle, title=title)
    db.add(menu)
    db.commit()
    db.refresh(menu)
    logger.info("Menu created", extra={"menu_id": menu.id, "handle": handle})
    return menu


@router.get("/menus", response_model=list[MenuOut])
def list_menus(db: Session = Depends(get_db)):
    return db.query(Menu).order_by(Menu.handle.asc()).all()


@router.get("/menus/{handle}", response_model=MenuOut)
def get_menu_by_handle(handle: str, db: Session = Depends(get_db)):
    menu = get_menu(db, handle)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    return menu


@router.put("/menus/{handle}", response_model=MenuOut)
def update_menu(handle: str, payload: MenuUpdate, db: Session = Depends(get_db)):
    menu = get_menu(db, handle)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    title = payload.title.strip()
    if not title:
        raise HTTPException(status_code=400, detail="Title cannot be empty")
    menu.title = title
    db.commit()
    db.refresh(menu)
    return menu


@router.delete("/menus/{handle}")
def delete_menu(handle: str, db: Session = Depends(get_db)):
    menu = get_menu(db, handle)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    db.delete(menu)
    db.commit()
    logger.info("Menu deleted", extra={"handle": handle})
    return {"status": "deleted"}
