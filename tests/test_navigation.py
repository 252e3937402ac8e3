"""Tests for the fixed navigation tree and active-section helpers."""

import pytest

from elkaliases_docs.navigation import (
    NAV_TREE,
    NavItem,
    find_item,
    is_active,
    iter_items,
    sidebar_current,
    validate_tree,
)
from elkaliases_docs.utils.exceptions import NavigationError


def test_tree_contents():
    assert [(i.id, i.label, i.href) for i in iter_items(NAV_TREE)] == [
        ("docs-home", "All Providers", "/docs/providers/index.html"),
        ("docs-elkaliases-index", "ElkAliases Provider", "/docs/providers/elkaliases/idex.html"),
        ("docs-elkaliases-resource", "Resources", "#"),
        ("docs-elkaliases-resource-elkaliases_index", "elkaliases_index",
         "/docs/providers/elkaliases/r/elkaliases_index.html"),
    ]


def test_resource_page_nested_under_resources():
    resources = find_item("docs-elkaliases-resource")
    assert [c.id for c in resources.children] == ["docs-elkaliases-resource-elkaliases_index"]


def test_find_item_missing():
    assert find_item("nonexistent") is None


@pytest.mark.parametrize("item_id,current,expected", [
    ("docs-home", "docs-home", True),
    ("docs-home", "docs-home ", False),
    ("docs-elkaliases-resource", "docs-elkaliases-resource-elkaliases_index", False),
    ("docs-elkaliases-index", "docs-elkaliases", False),
])
def test_is_active_exact_match(item_id, current, expected):
    assert is_active(item_id, current) is expected


def test_sidebar_current_fragment():
    assert sidebar_current("docs-home", "docs-home") == ' class="active"'
    assert sidebar_current("docs-home", "other") == ""


def test_validate_tree_rejects_duplicates():
    with pytest.raises(NavigationError) as exc:
        validate_tree([
            NavItem(id="x", label="X", href="#"),
            NavItem(id="y", label="Y", href="#", children=[NavItem(id="x", label="X", href="#")]),
        ])
    assert exc.value.item_id == "x"
