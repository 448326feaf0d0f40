"""Markdown to HTML conversion and semantic post-processing."""

from __future__ import annotations

import re
from typing import List

import markdown
from bs4 import BeautifulSoup, NavigableString

from .errors import ContentParseError, UnsafeContentError

# the "extra" bundle minus attr_list: "{#id}" stays literal text so headings
# render the same words the title extractor reads
MARKDOWN_EXTENSIONS = ["abbr", "def_list", "fenced_code", "footnotes", "md_in_html", "tables"]

DENYLIST = ("script", "iframe", "object", "embed", "form")

LIST_CLASSES = {"ul": "content-list", "ol": "numbered-list"}

_HEADING = re.compile(r"^h[1-6]$")


def convert_markdown_to_html(md_text: str) -> str:
    """Convert markdown to HTML with minimal extensions."""
    try:
        return markdown.markdown(md_text, extensions=MARKDOWN_EXTENSIONS)
    except Exception as exc:
        raise ContentParseError(f"Failed to convert markdown: {exc!r}") from exc


def _top_level(soup: BeautifulSoup) -> List:
    return [n for n in soup.contents if not (isinstance(n, NavigableString) and not n.strip())]


def wrap_article(html_text: str) -> str:
    """Wrap output holding more than one heading in a single ``<article>``."""
    soup = BeautifulSoup(html_text, "html.parser")
    top = _top_level(soup)
    if len(top) == 1 and getattr(top[0], "name", None) == "article":
        return html_text
    if len(soup.find_all(_HEADING)) <= 1:
        return html_text
    return f"<article>\n{html_text}\n</article>"


def mark_lists(html_text: str) -> str:
    """Add a class to every list that is not nested inside another list."""
    soup = BeautifulSoup(html_text, "html.parser")
    changed = False
    for tag in soup.find_all(list(LIST_CLASSES)):
        if tag.find_parent(list(LIST_CLASSES)) is not None:
            continue
        classes = tag.get("class") or []
        css = LIST_CLASSES[tag.name]
        if css not in classes:
            tag["class"] = [*classes, css]
            changed = True
    return str(soup) if changed else html_text


def enhance_semantics(html_text: str) -> str:
    return mark_lists(wrap_article(html_text))


def validate_html(html_text: str) -> str:
    """Reject HTML carrying any denylisted element; return it unchanged otherwise."""
    soup = BeautifulSoup(html_text, "html.parser")
    found = soup.find(list(DENYLIST))
    if found is not None:
        raise UnsafeContentError(found.name)
    return html_text


def finalize_html(html_text: str) -> str:
    """Post-process and check HTML from any source (converter or plugin)."""
    try:
        return validate_html(enhance_semantics(html_text))
    except RecursionError as exc:
        raise ContentParseError("HTML is nested too deeply to process") from exc


def render_markdown(md_text: str) -> str:
    return finalize_html(convert_markdown_to_html(md_text))
