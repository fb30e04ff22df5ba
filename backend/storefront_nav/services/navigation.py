"""Build the navigation tree for one render of a menu.

The renderer is a pure function over an already loaded, ordered sequence of
section snapshots. It never sorts, filters or rewrites the sections it is
given: one item per section, in input order, with title and url copied
verbatim.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SectionRecord:
    id: Hashable
    title: str
    url: str
    parent_id: Hashable | None = None


@dataclass
class NavItem:
    id: Hashable
    title: str
    url: str
    active: bool = False
    child_active: bool = False
    children: list[NavItem] = field(default_factory=list)


@dataclass
class NavTree:
    items: list[NavItem]
    active_section_id: Hashable | None = None

    def walk(self) -> Iterator[NavItem]:
        """Yield every item depth-first, parents before their children."""
        stack = list(reversed(self.items))
        while stack:
            item = stack.pop()
            yield item
            stack.extend(reversed(item.children))

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())


def is_active(section: SectionRecord, active_section_id: Hashable | None) -> bool:
    if active_section_id is None:
        return False
    return section.id == active_section_id


def render_navigation(sections: Sequence[SectionRecord], active_section_id: Hashable | None = None) -> NavTree:
    items = [
        NavItem(id=section.id, title=section.title, url=section.url, active=is_active(section, active_section_id))
        for section in sections
    ]

    # A parent must appear earlier in the sequence; anything else stays at the top level.
    seen: dict[Hashable, NavItem] = {}
    roots: list[NavItem] = []
    for section, item in zip(sections, items):
        parent = seen.get(section.parent_id) if section.parent_id is not None else None
        if parent is not None:
            parent.children.append(item)
        else:
            roots.append(item)
        seen.setdefault(section.id, item)

    for item in roots:
        _mark_active_trail(item)
    return NavTree(items=roots, active_section_id=active_section_id)


def _mark_active_trail(item: NavItem) -> bool:
    for child in item.children:
        if _mark_active_trail(child):
            item.child_active = True
    return item.active or item.child_active
