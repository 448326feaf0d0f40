from __future__ import annotations

import pytest

from grove import converter
from grove.converter import (
    convert_markdown_to_html,
    enhance_semantics,
    mark_lists,
    render_markdown,
    validate_html,
    wrap_article,
)
from grove.document import assemble_markdown
from grove.errors import ContentParseError, UnsafeContentError


def test_render_basic_markdown() -> None:
    html = render_markdown("# Hello World\n\nThis is a test.")
    assert "<h1>Hello World</h1>" in html
    assert "<p>This is a test.</p>" in html
    assert "<article>" not in html


def test_render_tables_and_fenced_code() -> None:
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n\n```\nx = 1\n```\n")
    assert "<table>" in html
    assert "<code>" in html


def test_multiple_headings_wrapped_in_article() -> None:
    html = wrap_article("<h1>First</h1>\n<p>Content</p>\n<h2>Second</h2>")
    assert html.startswith("<article>")
    assert html.endswith("</article>")


def test_single_heading_not_wrapped() -> None:
    source = "<h1>Only</h1>\n<p>Content</p>"
    assert wrap_article(source) == source


def test_article_wrap_is_not_repeated() -> None:
    once = wrap_article("<h1>A</h1><h2>B</h2>")
    assert wrap_article(once) == once
    assert once.count("<article>") == 1


def test_top_level_lists_get_classes() -> None:
    assert '<ul class="content-list">' in mark_lists("<ul>\n<li>Item 1</li>\n</ul>")
    assert '<ol class="numbered-list">' in mark_lists("<ol>\n<li>Step 1</li>\n</ol>")


def test_nested_lists_are_left_alone() -> None:
    html = mark_lists("<ul><li>Outer<ol><li>Nested</li></ol></li></ul>")
    assert '<ul class="content-list">' in html
    assert "<ol><li>Nested</li></ol>" in html


def test_existing_list_class_is_kept() -> None:
    assert 'class="steps numbered-list"' in mark_lists('<ol class="steps"><li>a</li></ol>')


def test_enhance_is_idempotent() -> None:
    source = "<h1>A</h1>\n<ul>\n<li>x</li>\n</ul>\n<h2>B</h2>"
    once = enhance_semantics(source)
    assert enhance_semantics(once) == once


@pytest.mark.parametrize(
    "html, tag",
    [
        ("<p>ok</p><script>alert(1)</script>", "script"),
        ("<SCRIPT>alert(1)</SCRIPT>", "script"),
        ('<iframe src="https://example.com"></iframe>', "iframe"),
        ('<object data="x.swf"></object>', "object"),
        ('<embed src="x.swf">', "embed"),
        ('<div><form action="/post"><input></form></div>', "form"),
    ],
)
def test_denylisted_elements_rejected(html: str, tag: str) -> None:
    with pytest.raises(UnsafeContentError) as excinfo:
        validate_html(html)
    assert excinfo.value.tag == tag
    assert f"<{tag}>" in str(excinfo.value)


@pytest.mark.parametrize(
    "html",
    [
        '<p class="script">styled</p>',
        "<p>The words script and form are fine.</p>",
        "<pre><code>&lt;script&gt;alert(1)&lt;/script&gt;</code></pre>",
    ],
)
def test_safe_html_passes(html: str) -> None:
    assert validate_html(html) == html


def test_raw_html_in_markdown_is_checked() -> None:
    with pytest.raises(UnsafeContentError):
        render_markdown("Intro\n\n<script>alert(1)</script>\n")


def test_code_mentioning_script_is_allowed() -> None:
    html = render_markdown("Use `<script>` tags carefully.\n")
    assert "&lt;script&gt;" in html


def test_heading_attribute_syntax_matches_title() -> None:
    doc = assemble_markdown("# Hello {#intro}\n\ntext", "a.md")
    assert doc.resolved_title == "Hello {#intro}"
    assert "<h1>Hello {#intro}</h1>" in doc.body
    assert 'id="intro"' not in doc.body


def test_converter_failure_becomes_parse_error(monkeypatch) -> None:
    def explode(*args, **kwargs):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr(converter.markdown, "markdown", explode)
    with pytest.raises(ContentParseError):
        convert_markdown_to_html("- x\n")
