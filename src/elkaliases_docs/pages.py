"""Documentation pages of the ElkAliases provider site.

Each page names the sidebar section it belongs to; rendering a page wraps
the layout fragment (sidebar + body) in the enclosing document.
"""

from typing import Dict, Iterator, Optional

from jinja2 import Environment
from markupsafe import Markup
from pydantic import BaseModel

from .layout import PageLayoutRenderer, get_renderer
from .templates import DOCUMENT_TEMPLATE
from .utils.exceptions import PageNotFoundError
from .utils.logger import logger


class Page(BaseModel):
    """A single documentation page.

    Attributes:
        path: URL path the page is served and written at
        section_id: Sidebar item marked active on this page
        title: Document title
        body: Trusted HTML for the main content area
    """
    path: str
    section_id: str
    title: str
    body: str


PROVIDERS_INDEX_BODY = """\
<div id="inner">
  <h1>Providers</h1>
  <p>Providers manage the lifecycle of remote resources. Select a provider
  from the list below to read its documentation.</p>
  <ul>
    <li><a href="/docs/providers/elkaliases/index.html">ElkAliases</a></li>
  </ul>
</div>"""


ELKALIASES_INDEX_BODY = """\
<div id="inner">
  <h1>ElkAliases Provider</h1>
  <p>The ElkAliases provider manages Elasticsearch composable index templates,
  including the aliases attached to the indices they create.</p>
  <h2>Example Usage</h2>
  <pre><code>provider "elkaliases" {
  url   = "https://elasticsearch.example.com:9200"
  token = var.elasticsearch_api_key
}</code></pre>
  <h2>Argument Reference</h2>
  <ul>
    <li><code>url</code> - (Required) The URL for the Elasticsearch instance.
    Defaults to the <code>ELASTICSEARCH_ENDPOINT</code> environment variable.</li>
    <li><code>token</code> - (Required, Sensitive) The API key used in the
    <code>Authorization: ApiKey</code> header. Defaults to the
    <code>ELASTICSEARCH_API_KEY</code> environment variable.</li>
    <li><code>insecure</code> - (Optional) Skip server certificate verification.
    Defaults to <code>false</code>.</li>
  </ul>
</div>"""


ELKALIASES_INDEX_RESOURCE_BODY = """\
<div id="inner">
  <h1>elkaliases_index</h1>
  <p>Manages an Elasticsearch composable index template.</p>
  <h2>Example Usage</h2>
  <pre><code>resource "elkaliases_index" "logs" {
  name           = "logs"
  index_patterns = ["logs-*"]
  composed_of    = []

  template {
    mappings = jsonencode({ properties = { message = { type = "text" } } })
    settings = jsonencode({ number_of_shards = 1 })

    alias {
      name   = "logs-errors"
      filter = jsonencode({ term = { level = "error" } })
    }
  }
}</code></pre>
  <h2>Argument Reference</h2>
  <ul>
    <li><code>name</code> - (Required) Name of the index template.</li>
    <li><code>index_patterns</code> - (Required) Index name patterns the template applies to.</li>
    <li><code>composed_of</code> - (Required) Component templates merged into this template, in order.</li>
    <li><code>data_stream</code> - (Optional) At most one block. Creates data streams instead of indices:
      <ul>
        <li><code>allow_custom_routing</code> - (Optional) Defaults to <code>false</code>.</li>
        <li><code>hidden</code> - (Optional) Defaults to <code>false</code>.</li>
      </ul>
    </li>
    <li><code>template</code> - (Required) Exactly one block:
      <ul>
        <li><code>mappings</code> - (Required) JSON encoded mappings.</li>
        <li><code>settings</code> - (Required) JSON encoded index settings.</li>
        <li><code>alias</code> - (Optional) Repeatable. <code>name</code> (Required)
        and <code>filter</code> (Required, JSON encoded query).</li>
      </ul>
    </li>
  </ul>
  <h2>Import</h2>
  <p>Index templates can be imported by name:</p>
  <pre><code>terraform import elkaliases_index.logs logs</code></pre>
</div>"""


_PAGES: Dict[str, Page] = {}


def register_page(page: Page) -> Page:
    _PAGES[page.path] = page
    return page


register_page(Page(
    path="/docs/providers/index.html",
    section_id="docs-home",
    title="All Providers",
    body=PROVIDERS_INDEX_BODY,
))
register_page(Page(
    path="/docs/providers/elkaliases/index.html",
    section_id="docs-elkaliases-index",
    title="ElkAliases Provider",
    body=ELKALIASES_INDEX_BODY,
))
register_page(Page(
    path="/docs/providers/elkaliases/r/elkaliases_index.html",
    section_id="docs-elkaliases-resource-elkaliases_index",
    title="elkaliases_index",
    body=ELKALIASES_INDEX_RESOURCE_BODY,
))


def get_page(path: str) -> Page:
    """Look up a page by URL path.

    Raises:
        PageNotFoundError: If no page is registered at path
    """
    if not path.startswith("/"):
        path = f"/{path}"
    page = _PAGES.get(path)
    if page is None:
        raise PageNotFoundError(path)
    return page


def iter_pages() -> Iterator[Page]:
    yield from _PAGES.values()


_document = Environment(autoescape=True).from_string(DOCUMENT_TEMPLATE)


def render_page(page: Page, renderer: Optional[PageLayoutRenderer] = None) -> str:
    """Render a complete HTML document for page."""
    renderer = renderer or get_renderer()
    fragment = renderer.render(page.section_id, lambda: page.body)
    logger.debug(f"Rendering page {page.path}")
    return _document.render(title=page.title, content=Markup(fragment))
