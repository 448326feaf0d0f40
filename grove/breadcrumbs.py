"""Breadcrumb trails from a document's directory ancestry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import List, Optional, Tuple

from .config import BreadcrumbConfig
from .document import Document, DocumentCollection

HOME_TITLE = "Home"
ELLIPSIS_TITLE = "..."


@dataclass(frozen=True)
class BreadcrumbItem:
    title: str
    url: str
    is_current: bool = False


BreadcrumbTrail = Tuple[BreadcrumbItem, ...]


def title_case(name: str) -> str:
    """``getting-started`` -> ``Getting Started``."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split("-"))


def directory_title(directory: PurePosixPath, documents: DocumentCollection) -> str:
    index = documents.index_for(directory)
    if index is not None and index.resolved_title:
        return index.resolved_title
    return title_case(directory.name)


def is_site_root(doc: Document) -> bool:
    return doc.is_index and doc.directory == PurePosixPath(".")


def truncate_trail(items: List[BreadcrumbItem], max_items: Optional[int]) -> List[BreadcrumbItem]:
    """Keep Home, an ellipsis and the last ``max_items - 2`` entries.

    Limits below 3 leave the trail untouched.
    """
    if max_items is None or max_items < 3 or len(items) <= max_items:
        return items
    tail = items[len(items) - (max_items - 2):]
    return [items[0], BreadcrumbItem(ELLIPSIS_TITLE, ""), *tail]


def resolve_breadcrumbs(
    doc: Document,
    documents: DocumentCollection,
    config: Optional[BreadcrumbConfig] = None,
) -> Optional[BreadcrumbTrail]:
    """Home, one entry per ancestor directory, then the document itself."""
    config = config or BreadcrumbConfig()
    if not config.enabled or is_site_root(doc):
        return None

    items = [BreadcrumbItem(HOME_TITLE, "")]
    current = PurePosixPath()
    for part in doc.directory.parts:
        current = current / part
        items.append(BreadcrumbItem(directory_title(current, documents), current.as_posix()))
    items.append(BreadcrumbItem(doc.resolved_title, doc.url, is_current=True))

    return tuple(truncate_trail(items, config.max_items))
