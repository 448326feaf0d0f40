"""Built-in templates, used when the site's template directory lacks one."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_BREADCRUMB = """\
{% if breadcrumbs %}
<nav aria-label="breadcrumb">
  <ol class="breadcrumb">
  {% for item in breadcrumbs %}
    {% if item.is_current %}
    <li class="breadcrumb-item active" aria-current="page">{{ item.title }}</li>
    {% elif item.url or loop.first %}
    <li class="breadcrumb-item"><a href="{{ item.url | dir_href(current_url) }}">{{ item.title }}</a></li>
    {% else %}
    <li class="breadcrumb-item">{{ item.title }}</li>
    {% endif %}
  {% endfor %}
  </ol>
</nav>
{% endif %}
"""

_PAGE = """\
<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{% if site.title %}{{ page.resolved_title }} · {{ site.title }}{% else %}{{ page.resolved_title }}{% endif %}</title>
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
    <style>
      body { background: #fcfcfc; color: #222; }
      .content { max-width: 980px; margin: 2.5rem auto 5rem; padding: 3rem 4rem; background: white;
                 border: 1px solid #e5e5e5; border-radius: 8px; line-height: 1.7; }
      .content img { max-width: 100%; height: auto; }
    </style>
  </head>
  <body>
    <main class="content">
      {% include "breadcrumb.html" %}
      {% block content %}
      {{ page.body | safe }}
      {% endblock %}
    </main>
    {% if site.footer_text %}<footer class="text-center text-muted mb-4">{{ site.footer_text }}</footer>{% endif %}
  </body>
</html>
"""

_LIST = """\
{% extends "page.html" %}
{% block content %}
{{ page.body | safe }}
<section class="listing">
  <p class="text-muted">{{ listing.total_count }} {{ "entry" if listing.total_count == 1 else "entries" }}</p>
  {% for item in listing.items %}
  <article class="mb-4">
    <h2 class="h5"><a href="{{ item.url | href(current_url) }}">{{ item.title }}</a></h2>
    {% if item.date %}<p class="text-muted small">{{ item.date }}</p>{% endif %}
    {% if item.excerpt %}<p>{{ item.excerpt }}</p>{% endif %}
  </article>
  {% endfor %}
</section>
{% endblock %}
"""

DEFAULT_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        "breadcrumb.html": _BREADCRUMB,
        "page.html": _PAGE,
        "list.html": _LIST,
    }
)
