from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from urllib.parse import urlsplit

from storefront_nav.services.navigation import SectionRecord


@dataclass(frozen=True)
class PageContext:
    active_section_id: Hashable | None = None
    path: str | None = None


def resolve_active_section(
    page: PageContext,
    sections: Sequence[SectionRecord] = (),
    match_path: bool = True,
) -> Hashable | None:
    """Return the id of the section the page belongs to.

    An id named by the page wins and is returned unchanged, whether or not it
    exists in ``sections``. Only when the page names none is its request path
    matched against the section urls.
    """
    if page.active_section_id is not None:
        return page.active_section_id
    if match_path and page.path:
        return match_section_by_path(sections, page.path)
    return None


def match_section_by_path(sections: Sequence[SectionRecord], path: str) -> Hashable | None:
    target = _normalize_path(path) or "/"
    best_id = None
    best_len = -1
    for section in sections:
        section_path = _normalize_path(section.url)
        if not section_path:
            # "#" and other fragment-only links never match a page
            continue
        if target == section_path:
            match_len = len(section_path)
        elif section_path != "/" and target.startswith(section_path + "/"):
            match_len = len(section_path)
        else:
            continue
        if match_len > best_len:
            best_len = match_len
            best_id = section.id
    return best_id


def _normalize_path(value: str) -> str:
    parts = urlsplit(value.strip())
    path = parts.path
    if not path:
        # "https://shop.example" is the home page; "#top" and "?q=x" are not pages
        return "/" if parts.netloc else ""
    return path.rstrip("/") or "/"
