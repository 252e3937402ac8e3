"""Sidebar navigation tree for the ElkAliases documentation site.

The tree is fixed at build time. An item is active only when its id equals
the current section id exactly; parents of the active item are not marked.
"""

from typing import Iterable, Iterator, List, Optional

from markupsafe import Markup
from pydantic import BaseModel, Field

from .config import config
from .utils.exceptions import NavigationError


class NavItem(BaseModel):
    """One entry in the sidebar navigation tree.

    Attributes:
        id: Section id compared against the page's current section
        label: Link text
        href: Link target, emitted verbatim
        children: Nested items rendered in a sub-list
    """
    id: str
    label: str
    href: str
    children: List["NavItem"] = Field(default_factory=list)


NavItem.model_rebuild()


def iter_items(items: Iterable[NavItem]) -> Iterator[NavItem]:
    """Walk the tree depth-first, parents before their children."""
    for item in items:
        yield item
        yield from iter_items(item.children)


def validate_tree(items: List[NavItem]) -> List[NavItem]:
    """Raise NavigationError if any id appears twice in the tree."""
    seen = set()
    for item in iter_items(items):
        if item.id in seen:
            raise NavigationError(f"Duplicate navigation id: {item.id}", item.id)
        seen.add(item.id)
    return items


def find_item(item_id: str, items: Optional[List[NavItem]] = None) -> Optional[NavItem]:
    for item in iter_items(NAV_TREE if items is None else items):
        if item.id == item_id:
            return item
    return None


def is_active(item_id: str, current_section_id: str) -> bool:
    return item_id == current_section_id


def sidebar_current(item_id: str, current_section_id: str) -> Markup:
    """Return the class attribute fragment for an <li>, or "" when inactive.

    The configured class name is escaped into the attribute value.
    """
    if is_active(item_id, current_section_id):
        return Markup(' class="{}"').format(config.active_class)
    return Markup("")


NAV_TREE: List[NavItem] = validate_tree([
    NavItem(
        id="docs-home",
        label="All Providers",
        href="/docs/providers/index.html",
    ),
    NavItem(
        id="docs-elkaliases-index",
        label="ElkAliases Provider",
        href="/docs/providers/elkaliases/idex.html",
    ),
    NavItem(
        id="docs-elkaliases-resource",
        label="Resources",
        href="#",
        children=[
            NavItem(
                id="docs-elkaliases-resource-elkaliases_index",
                label="elkaliases_index",
                href="/docs/providers/elkaliases/r/elkaliases_index.html",
            ),
        ],
    ),
])
