import html
from dataclasses import dataclass
from storefront_nav.core.config import settings
from storefront_nav.services.navigation import NavItem, NavTree


@dataclass(frozen=True)
class MarkupOptions:
    list_class: str = "site-nav"
    item_class: str = "site-nav__item"
    link_class: str = "site-nav__link"
    dropdown_class: str = "site-nav__dropdown"
    active_class: str = "active"
    trail_class: str = "active-trail"

    @classmethod
    def from_settings(cls) -> "MarkupOptions":
        return cls(
            list_class=settings.nav_list_class,
            item_class=settings.nav_item_class,
            link_class=settings.nav_link_class,
            dropdown_class=settings.nav_dropdown_class,
            active_class=settings.nav_active_class,
            trail_class=settings.nav_trail_class,
        )


def render_markup(tree: NavTree, options: MarkupOptions | None = None) -> str:
    options = options or MarkupOptions()
    return "\n".join(_render_list(tree.items, options.list_class, options, depth=0))


def _render_list(items: list[NavItem], css_class: str, options: MarkupOptions, depth: int) -> list[str]:
    indent = "  " * depth
    if not items:
        return [f'{indent}<ul class="{_attr(css_class)}"></ul>']
    lines = [f'{indent}<ul class="{_attr(css_class)}">']
    for item in items:
        lines.extend(_render_item(item, options, depth + 1))
    lines.append(f"{indent}</ul>")
    return lines


def _render_item(item: NavItem, options: MarkupOptions, depth: int) -> list[str]:
    indent = "  " * depth
    item_classes = [options.item_class]
    if item.child_active:
        item_classes.append(options.trail_class)
    link_classes = [options.link_class]
    if item.active:
        link_classes.append(options.active_class)
    current = ' aria-current="page"' if item.active else ""
    link = (
        f'<a class="{_attr(_join(link_classes))}" href="{_attr(item.url)}"{current}>'
        f"{html.escape(item.title, quote=False)}</a>"
    )
    opening = f'{indent}<li class="{_attr(_join(item_classes))}">{link}'
    if not item.children:
        return [opening + "</li>"]
    lines = [opening]
    lines.extend(_render_list(item.children, options.dropdown_class, options, depth + 1))
    lines.append(f"{indent}</li>")
    return lines


def _join(classes: list[str]) -> str:
    return " ".join(name for name in classes if name)


def _attr(value: str) -> str:
    return html.escape(value, quote=True)
