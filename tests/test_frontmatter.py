from __future__ import annotations

import logging

from grove.frontmatter import Metadata, decode_header, split_header, HeaderError

import pytest


def test_toml_header() -> None:
    text = '+++\ntitle = "Test Title"\ndate = "2024-01-15"\nlist = true\n+++\n\n# Content\n\nThis is the markdown content.'
    header = split_header(text)
    assert header.dialect == "toml"
    assert header.metadata.title == "Test Title"
    assert header.metadata.date == "2024-01-15"
    assert header.metadata.is_listing is True
    assert header.body == "# Content\n\nThis is the markdown content."


def test_yaml_header() -> None:
    text = "---\ntitle: Hello\ntags:\n  - rust\n  - web\npage_template: post.html\n---\nBody text\n"
    header = split_header(text)
    assert header.dialect == "yaml"
    assert header.metadata.title == "Hello"
    assert header.metadata.tags == ["rust", "web"]
    assert header.metadata.custom_template == "post.html"
    assert header.body == "Body text\n"


def test_sort_fields_are_read() -> None:
    header = split_header('+++\nsort_by = "title"\nsort_order = "asc"\n+++\n')
    assert header.metadata.sort_field == "title"
    assert header.metadata.sort_order == "asc"
    assert header.body == ""


def test_no_header_leaves_text_untouched() -> None:
    text = "# Simple Content\n\nNo metadata here.\n"
    header = split_header(text)
    assert header.metadata == Metadata()
    assert header.dialect is None
    assert header.body == text


def test_header_only_recognised_at_start() -> None:
    text = 'Intro\n\n+++\ntitle = "late"\n+++\n'
    header = split_header(text)
    assert header.metadata.title is None
    assert header.body == text


def test_unclosed_header_is_not_a_header() -> None:
    text = "---\ntitle: open\n\nBody"
    header = split_header(text)
    assert header.metadata.title is None
    assert header.body == text


def test_body_keeps_exact_bytes() -> None:
    body = "# Heading\n\nSome  *spaced*   text\n\n\n    indented code\n\ttab\n"
    text = '+++\ntitle = "T"\n+++\n\n\n' + body
    assert split_header(text).body == body


def test_body_with_crlf_line_endings() -> None:
    text = '+++\r\ntitle = "T"\r\n+++\r\n\r\nBody\r\nline\r\n'
    header = split_header(text)
    assert header.metadata.title == "T"
    assert header.body == "Body\r\nline\r\n"


def test_empty_header() -> None:
    header = split_header("---\n---\nBody")
    assert header.metadata == Metadata()
    assert header.body == "Body"


@pytest.mark.parametrize(
    "text",
    [
        '+++\ntitle = "Test Title"\ninvalid toml syntax\n+++\n\n# Content',
        '---\ntitle: "Test Title"\ninvalid: yaml: syntax::\n---\n\n# Content',
        "---\njust a sentence\n---\n\n# Content",
        "---\ntitle: [not, a, string]\n---\n\n# Content",
    ],
)
def test_malformed_header_degrades_to_empty_metadata(text: str, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        header = split_header(text, source="post.md")
    assert header.metadata == Metadata()
    assert header.body == text
    assert "post.md" in caplog.text


def test_native_dates_become_strings() -> None:
    assert split_header("+++\ndate = 2024-01-15\n+++\n").metadata.date == "2024-01-15"
    assert split_header("---\ndate: 2023-12-31\n---\n").metadata.date == "2023-12-31"


def test_unknown_keys_are_ignored() -> None:
    metadata = decode_header('title = "x"\nauthor = "someone"\n', "toml")
    assert metadata.title == "x"


def test_decode_header_raises_header_error() -> None:
    with pytest.raises(HeaderError):
        decode_header("- a\n- b\n", "yaml")
