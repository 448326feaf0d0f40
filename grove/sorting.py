"""Ordering of documents for listings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional

from .dates import parse_date
from .document import Document
from .frontmatter import Metadata

logger = logging.getLogger(__name__)

SORT_FIELDS = ("date", "title", "filename")
SORT_ORDERS = ("asc", "desc")

DEFAULT_FIELD = "date"
DEFAULT_ORDER = "desc"


@dataclass(frozen=True)
class SortConfig:
    field: str = DEFAULT_FIELD
    order: str = DEFAULT_ORDER

    @classmethod
    def normalized(cls, field: Optional[str], order: Optional[str]) -> "SortConfig":
        """Build a config, replacing invalid values with the defaults.

        An absent order means ``desc`` for dates and ``asc`` otherwise.
        """
        field = (field or DEFAULT_FIELD).strip().lower()
        if field not in SORT_FIELDS:
            logger.warning("Invalid sort field '%s', falling back to '%s'", field, DEFAULT_FIELD)
            field = DEFAULT_FIELD

        if order is None:
            return cls(field, "desc" if field == "date" else "asc")
        order = order.strip().lower()
        if order not in SORT_ORDERS:
            logger.warning("Invalid sort order '%s', falling back to '%s'", order, DEFAULT_ORDER)
            order = DEFAULT_ORDER
        return cls(field, order)

    @classmethod
    def from_metadata(cls, metadata: Metadata) -> "SortConfig":
        return cls.normalized(metadata.sort_field, metadata.sort_order)


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_filenames(a: Document, b: Document) -> int:
    return _cmp(a.filename, b.filename)


def compare_titles(a: Document, b: Document) -> int:
    return _cmp(a.resolved_title, b.resolved_title)


def sort_documents(documents: Iterable[Document], config: SortConfig) -> List[Document]:
    """Stable sort by ``config.field``.

    For dates, documents with a parseable date always precede those without one;
    the order direction applies within each group, and undated documents are
    ordered by filename.
    """
    config = SortConfig.normalized(config.field, config.order)
    sign = -1 if config.order == "desc" else 1

    def by_date(a: Document, b: Document) -> int:
        date_a = parse_date(a.metadata.date)
        date_b = parse_date(b.metadata.date)
        if date_a is not None and date_b is not None:
            return sign * _cmp(date_a, date_b)
        if date_a is not None:
            return -1
        if date_b is not None:
            return 1
        return sign * compare_filenames(a, b)

    def by_field(a: Document, b: Document) -> int:
        if config.field == "title":
            return sign * compare_titles(a, b)
        return sign * compare_filenames(a, b)

    compare = by_date if config.field == "date" else by_field
    return sorted(documents, key=cmp_to_key(compare))
