import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session
from storefront_nav.core.config import settings
from storefront_nav.db.session import get_db
from storefront_nav.models import Menu
from storefront_nav.schemas.navigation import NavigationOut
from storefront_nav.services.active_section import PageContext, resolve_active_section
from storefront_nav.services.markup import MarkupOptions, render_markup
from storefront_nav.services.navigation import NavTree, render_navigation
from storefront_nav.services.section_source import get_menu, load_sections

logger = logging.getLogger(__name__)

router = APIRouter()


def _build_navigation(db: Session, handle: str, page: PageContext) -> tuple[Menu, NavTree]:
    menu = get_menu(db, handle)
    if not menu:
        raise HTTPException(status_code=404, detail="Menu not found")
    sections = load_sections(db, menu)
    active_section_id = resolve_active_section(page, sections, match_path=settings.nav_match_path)
    tree = render_navigation(sections, active_section_id)
    logger.info(
        "Navigation rendered",
        extra={"handle": handle, "items": len(sections), "active_section_id": active_section_id},
    )
    return menu, tree


@router.get("/menus/{handle}/navigation", response_model=NavigationOut)
def get_navigation(
    handle: str,
    active_section_id: int | None = Query(None),
    path: str | None = Query(None),
    db: Session = Depends(get_db),
):
    menu, tree = _build_navigation(db, handle, PageContext(active_section_id=active_section_id, path=path))
    return NavigationOut(
        handle=menu.handle,
        title=menu.title,
        active_section_id=tree.active_section_id,
        items=[asdict(item) for item in tree.items],
    )


@router.get("/menus/{handle}/navigation.html", response_class=HTMLResponse)
def get_navigation_html(
    handle: str,
    active_section_id: int | None = Query(None),
    path: str | None = Query(None),
    db: Session = Depends(get_db),
):
    _, tree = _build_navigation(db, handle, PageContext(active_section_id=active_section_id, path=path))
    return HTMLResponse(render_markup(tree, MarkupOptions.from_settings()))
