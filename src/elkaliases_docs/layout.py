"""Page layout: sidebar navigation followed by the page body.

Example:
    >>> from elkaliases_docs.layout import render
    >>> html = render("docs-elkaliases-index", lambda: "<h1>Hi</h1>")
    >>> html.endswith("<h1>Hi</h1>")
    True
"""

from typing import Callable, List, Optional

from jinja2 import Environment, StrictUndefined

from .navigation import NAV_TREE, NavItem, sidebar_current, validate_tree
from .templates import SIDEBAR_TEMPLATE
from .utils.logger import logger


ContentProducer = Callable[[], str]


class PageLayoutRenderer:
    """Renders the sidebar for a given current section and appends the page body.

    Stateless apart from the compiled template: the same inputs always give
    the same output.
    """

    def __init__(self, items: Optional[List[NavItem]] = None):
        self.items = validate_tree(
            [item.model_copy(deep=True) for item in (NAV_TREE if items is None else items)]
        )
        self._env = Environment(autoescape=True, undefined=StrictUndefined)
        self._env.globals["sidebar_current"] = sidebar_current
        self._sidebar = self._env.from_string(SIDEBAR_TEMPLATE)

    def render_sidebar(self, current_section_id: str) -> str:
        return self._sidebar.render(
            items=self.items,
            current_section_id=current_section_id,
        )

    def render(self, current_section_id: str, content_producer: ContentProducer) -> str:
        """Render the sidebar, then append the producer's output verbatim.

        Args:
            current_section_id: Id of the section to mark active. Any string;
                no item is marked when nothing matches.
            content_producer: Zero-argument callable returning the page body HTML.
                Called once, after the sidebar is rendered. Its exceptions
                propagate unchanged.

        Returns:
            Sidebar markup followed by the page body.
        """
        sidebar = self.render_sidebar(current_section_id)
        logger.debug(f"Rendered sidebar for section '{current_section_id}'")
        body = content_producer()
        return f"{sidebar}\n{body}"


_default_renderer: Optional[PageLayoutRenderer] = None


def get_renderer() -> PageLayoutRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = PageLayoutRenderer()
    return _default_renderer


def render(current_section_id: str, content_producer: ContentProducer) -> str:
    """Render with the default renderer over the site navigation tree."""
    return get_renderer().render(current_section_id, content_producer)
