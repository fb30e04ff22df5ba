from fastapi import APIRouter
from storefront_nav.api import menus, sections, navigation

api_router = APIRouter()
api_router.include_router(menus.router, tags=["menus"])
api_router.include_router(sections.router, tags=["sections"])
api_router.include_router(navigation.router, tags=["navigation"])
