"""Tests for the page registry and full document rendering."""

import pytest

from elkaliases_docs.pages import get_page, iter_pages, render_page
from elkaliases_docs.utils.exceptions import PageNotFoundError


def test_registered_pages():
    assert [(p.path, p.section_id) for p in iter_pages()] == [
        ("/docs/providers/index.html", "docs-home"),
        ("/docs/providers/elkaliases/index.html", "docs-elkaliases-index"),
        ("/docs/providers/elkaliases/r/elkaliases_index.html",
         "docs-elkaliases-resource-elkaliases_index"),
    ]


def test_get_page_accepts_relative_path():
    assert get_page("docs/providers/index.html").section_id == "docs-home"


def test_get_page_unknown():
    with pytest.raises(PageNotFoundError) as exc:
        get_page("/docs/providers/missing.html")
    assert exc.value.path == "/docs/providers/missing.html"


def test_render_page_document():
    page = get_page("/docs/providers/elkaliases/r/elkaliases_index.html")
    html = render_page(page)
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>elkaliases_index - ElkAliases Provider</title>" in html
    assert '<li class="active">' in html
    assert html.count('<li class="active">') == 1
    assert "<code>index_patterns</code>" in html
    assert "<code>composed_of</code>" in html
    assert html.index("docs-sidenav") < html.index('<div id="inner">')


def test_provider_page_documents_arguments():
    html = render_page(get_page("/docs/providers/elkaliases/index.html"))
    for arg in ("url", "token", "insecure"):
        assert f"<code>{arg}</code>" in html
    assert "ELASTICSEARCH_ENDPOINT" in html
    assert "ELASTICSEARCH_API_KEY" in html
