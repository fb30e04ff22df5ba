import pytest

from storefront_nav.services.navigation import SectionRecord, render_navigation


def _flat(count: int) -> list[SectionRecord]:
    return [SectionRecord(id=i, title=f"Link {i}", url=f"/pages/{i}") for i in range(1, count + 1)]


@pytest.mark.parametrize("count", [0, 1, 7])
def test_item_count_matches_section_count(count: int) -> None:
    tree = render_navigation(_flat(count))
    assert len(tree.items) == count
    assert len(tree) == count


def test_empty_sequence_gives_empty_tree() -> None:
    tree = render_navigation([], active_section_id=3)
    assert tree.items == []
    assert list(tree.walk()) == []


def test_order_is_preserved() -> None:
    sections = [
        SectionRecord(id="c", title="Contact", url="/pages/contact"),
        SectionRecord(id="a", title="About", url="/pages/about"),
        SectionRecord(id="b", title="Blog", url="/blogs/news"),
    ]
    tree = render_navigation(sections)
    assert [item.id for item in tree.items] == ["c", "a", "b"]


def test_title_and_url_are_copied_verbatim() -> None:
    sections = [
        SectionRecord(id=1, title="  Shoes & <Bags> ", url="https://shop.example/collections/all?sort=price#top"),
        SectionRecord(id=2, title="", url=""),
    ]
    tree = render_navigation(sections)
    assert tree.items[0].title == "  Shoes & <Bags> "
    assert tree.items[0].url == "https://shop.example/collections/all?sort=price#top"
    assert tree.items[1].title == ""
    assert tree.items[1].url == ""


def test_two_item_example_marks_second_active() -> None:
    sections = [
        SectionRecord(id=1, title="Home", url="/"),
        SectionRecord(id=2, title="About", url="/about"),
    ]
    tree = render_navigation(sections, active_section_id=2)
    assert len(tree.items) == 2
    assert tree.items[0].active is False
    assert tree.items[1].active is True
    assert tree.active_section_id == 2


def test_exactly_matching_item_is_active() -> None:
    tree = render_navigation(_flat(5), active_section_id=3)
    assert [item.id for item in tree.walk() if item.active] == [3]


@pytest.mark.parametrize("active_section_id", [None, 99, "3"])
def test_unknown_or_missing_active_id_marks_nothing(active_section_id) -> None:
    tree = render_navigation(_flat(5), active_section_id=active_section_id)
    assert not any(item.active for item in tree.walk())
    assert not any(item.child_active for item in tree.walk())


def test_falsy_active_id_still_matches() -> None:
    sections = [SectionRecord(id=0, title="Home", url="/"), SectionRecord(id=1, title="Sale", url="/sale")]
    tree = render_navigation(sections, active_section_id=0)
    assert [item.active for item in tree.items] == [True, False]


def test_duplicate_ids_are_all_flagged() -> None:
    sections = [
        SectionRecord(id=4, title="Sale", url="/collections/sale"),
        SectionRecord(id=5, title="New", url="/collections/new"),
        SectionRecord(id=4, title="Sale again", url="/collections/sale"),
    ]
    tree = render_navigation(sections, active_section_id=4)
    assert [item.active for item in tree.items] == [True, False, True]


def test_rendering_is_idempotent() -> None:
    sections = [
        SectionRecord(id=1, title="Catalog", url="/collections/all"),
        SectionRecord(id=2, title="Shoes", url="/collections/shoes", parent_id=1),
        SectionRecord(id=3, title="About", url="/pages/about"),
    ]
    assert render_navigation(sections, 2) == render_navigation(sections, 2)


def test_input_sections_are_not_mutated() -> None:
    sections = _flat(3)
    before = list(sections)
    render_navigation(sections, active_section_id=2)
    assert sections == before


def test_children_nest_under_earlier_parent() -> None:
    sections = [
        SectionRecord(id=1, title="Home", url="/"),
        SectionRecord(id=2, title="Catalog", url="/collections/all"),
        SectionRecord(id=3, title="Shoes", url="/collections/shoes", parent_id=2),
        SectionRecord(id=4, title="Boots", url="/collections/boots", parent_id=3),
        SectionRecord(id=5, title="Bags", url="/collections/bags", parent_id=2),
    ]
    tree = render_navigation(sections)
    assert [item.id for item in tree.items] == [1, 2]
    catalog = tree.items[1]
    assert [child.id for child in catalog.children] == [3, 5]
    assert [child.id for child in catalog.children[0].children] == [4]
    assert [item.id for item in tree.walk()] == [1, 2, 3, 4, 5]
    assert len(tree) == len(sections)


def test_parent_that_is_missing_or_later_keeps_item_at_top_level() -> None:
    sections = [
        SectionRecord(id=1, title="Shoes", url="/collections/shoes", parent_id=2),
        SectionRecord(id=2, title="Catalog", url="/collections/all", parent_id=1),
        SectionRecord(id=3, title="Loop", url="/loop", parent_id=3),
        SectionRecord(id=4, title="Orphan", url="/orphan", parent_id=42),
    ]
    tree = render_navigation(sections)
    # Catalog follows Shoes, so it nests; Shoes cannot nest under a later item.
    assert [item.id for item in tree.items] == [1, 3, 4]
    assert [child.id for child in tree.items[0].children] == [2]
    assert len(tree) == 4


def test_active_trail_marks_ancestors_only() -> None:
    sections = [
        SectionRecord(id=1, title="Catalog", url="/collections/all"),
        SectionRecord(id=2, title="Shoes", url="/collections/shoes", parent_id=1),
        SectionRecord(id=3, title="Boots", url="/collections/boots", parent_id=2),
        SectionRecord(id=4, title="About", url="/pages/about"),
    ]
    tree = render_navigation(sections, active_section_id=3)
    flags = {item.id: (item.active, item.child_active) for item in tree.walk()}
    assert flags == {
        1: (False, True),
        2: (False, True),
        3: (True, False),
        4: (False, False),
    }
