from storefront_nav.models.base import Base
from storefront_nav.models.menu import Menu
from storefront_nav.models.section import Section

__all__ = [
    "Base",
    "Menu",
    "Section",
]
