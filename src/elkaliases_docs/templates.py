"""Jinja2 markup for the documentation layout."""


SIDEBAR_TEMPLATE = """\
<div class="docs-sidebar hidden-print affix-top" role="complementary">
  <ul class="nav docs-sidenav">
{%- for item in items recursive %}
    <li{{ sidebar_current(item.id, current_section_id) }}>
      <a href="{{ item.href }}">{{ item.label }}</a>
{%- if item.children %}
      <ul class="nav nav-visible">
{{- loop(item.children) }}
      </ul>
{%- endif %}
    </li>
{%- endfor %}
  </ul>
</div>
"""


# The enclosing "inner" layout a page fragment is wrapped in.
DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ title }} - ElkAliases Provider</title>
</head>
<body>
  <div class="container">
    <div class="row">
{{ content }}
    </div>
  </div>
</body>
</html>
"""
