"""Syntax tree access: mistune in AST mode plus a header rule.

Nodes are plain dicts as produced by mistune (``type``, ``raw``, ``children``,
``attrs``). The header rule reports where the header ends so callers can slice
the original text instead of searching for a closing fence.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import mistune

from .errors import ContentParseError

logger = logging.getLogger(__name__)

Node = Dict[str, Any]

FRONT_MATTER = "front_matter"
DIALECTS = {"+++": "toml", "---": "yaml"}

# only ever matches at offset 0 of the document
FRONT_MATTER_PATTERN = (
    r"\A(?P<front_matter_fence>\+\+\+|---)[ \t]*\n"
    r"(?P<front_matter_text>[\s\S]*?)"
    r"^(?P=front_matter_fence)[ \t]*$"
)


# -- header rule --
def parse_front_matter(block: Any, m: Any, state: Any) -> int:
    fence = m.group("front_matter_fence")
    state.append_token(
        {
            "type": FRONT_MATTER,
            "raw": m.group("front_matter_text"),
            "attrs": {"dialect": DIALECTS[fence], "end": m.end()},
        }
    )
    return m.end()


def front_matter(md: mistune.Markdown) -> None:
    """mistune plugin: recognise a ``+++``/``---`` header block at offset 0."""
    md.block.register(FRONT_MATTER, FRONT_MATTER_PATTERN, parse_front_matter, before="fenced_code")


def create_parser() -> mistune.Markdown:
    md = mistune.create_markdown(renderer="ast", plugins=["strikethrough", "table"])
    front_matter(md)
    return md


_parser: Optional[mistune.Markdown] = None


def parse_tree(text: str) -> List[Node]:
    """Parse ``text`` into a list of top-level nodes (header node included)."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    try:
        return list(_parser(text))
    except Exception as exc:
        raise ContentParseError(f"Failed to parse markdown: {exc}") from exc


def header_node(nodes: Iterable[Node]) -> Optional[Node]:
    """Return the header node if the document starts with one."""
    for node in nodes:
        if node.get("type") == FRONT_MATTER:
            return node
        if node.get("type") != "blank_line":
            return None
    return None


def body_nodes(nodes: Iterable[Node]) -> List[Node]:
    return [node for node in nodes if node.get("type") != FRONT_MATTER]


def source_offset(text: str, offset: int) -> int:
    """Map an offset in newline-normalised text back onto ``text``.

    mistune folds ``\\r\\n`` into ``\\n`` before parsing, so positions it reports
    drift by one character per CRLF pair.
    """
    if "\r" not in text:
        return offset
    pos = 0
    for _ in range(offset):
        if pos >= len(text):
            break
        pos += 2 if text.startswith("\r\n", pos) else 1
    return pos


# -- text extraction --
_LINE_BREAKS = {"softbreak", "linebreak"}
_VERBATIM = {"text", "codespan", "inline_math"}


def extract_text(nodes: Iterable[Node]) -> str:
    """Flatten inline nodes into plain text.

    Formatting wrappers are dropped but their content kept, code spans are kept
    verbatim, images contribute their alt text and raw HTML contributes nothing.
    """
    parts: List[str] = []
    for node in nodes:
        kind = node.get("type")
        if kind in _VERBATIM:
            parts.append(node.get("raw", ""))
        elif kind in _LINE_BREAKS:
            parts.append("\n")
        elif kind == "image":
            if node.get("children"):
                parts.append(extract_text(node["children"]))
            else:
                parts.append((node.get("attrs") or {}).get("alt", ""))
        elif node.get("children"):
            parts.append(extract_text(node["children"]))
    return "".join(parts)
