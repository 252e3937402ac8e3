"""Documentation site for the ElkAliases provider.

Usage:
    from elkaliases_docs import render

    html = render("docs-elkaliases-index", lambda: "<h1>Hi</h1>")
"""

from .layout import PageLayoutRenderer, render
from .navigation import NAV_TREE, NavItem, is_active, sidebar_current
from .pages import Page, get_page, iter_pages, render_page

__all__ = [
    "NAV_TREE",
    "NavItem",
    "Page",
    "PageLayoutRenderer",
    "get_page",
    "is_active",
    "iter_pages",
    "render",
    "render_page",
    "sidebar_current",
]
