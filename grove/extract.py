"""Title and excerpt resolution."""

from __future__ import annotations

from pathlib import PurePath
from typing import Iterable, Optional

from .syntax import Node, extract_text


# -- titles --
def title_from_tree(nodes: Iterable[Node]) -> Optional[str]:
    """Plain text of the first top-level level-1 heading with visible text."""
    for node in nodes:
        if node.get("type") != "heading" or (node.get("attrs") or {}).get("level") != 1:
            continue
        text = extract_text(node.get("children", [])).strip()
        if text:
            return text
    return None


def title_from_path(path: PurePath) -> str:
    return path.stem or "Untitled"


def resolve_title(metadata_title: Optional[str], nodes: Iterable[Node], path: PurePath) -> str:
    """Metadata title, then first H1, then file stem."""
    if metadata_title and metadata_title.strip():
        return metadata_title
    return title_from_tree(nodes) or title_from_path(path)


# -- excerpts --
def excerpt_from_tree(nodes: Iterable[Node]) -> Optional[str]:
    """Text of the first top-level paragraph that is not blank.

    Headings, lists, block quotes and code blocks are never excerpts.
    """
    for node in nodes:
        if node.get("type") != "paragraph":
            continue
        text = extract_text(node.get("children", [])).strip()
        if text:
            return text
    return None


def excerpt_from_plain_text(text: str) -> Optional[str]:
    for paragraph in text.split("\n\n"):
        if paragraph.strip():
            return paragraph.strip()
    return None


def resolve_excerpt(
    metadata_excerpt: Optional[str],
    nodes: Optional[Iterable[Node]] = None,
    plain_text: Optional[str] = None,
) -> Optional[str]:
    """Metadata excerpt wins; otherwise extract from the tree or the plain text."""
    if metadata_excerpt is not None:
        return metadata_excerpt
    if nodes is not None:
        return excerpt_from_tree(nodes)
    if plain_text is not None:
        return excerpt_from_plain_text(plain_text)
    return None
