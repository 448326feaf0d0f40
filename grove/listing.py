"""Listing pages: ordered summaries of a directory's documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import List, Optional, Tuple, Union

from .document import Document, DocumentCollection
from .sorting import SortConfig, sort_documents


@dataclass(frozen=True)
class ListingItem:
    title: str
    url: str
    date: Optional[str] = None
    excerpt: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Document) -> "ListingItem":
        return cls(title=doc.resolved_title, url=doc.url, date=doc.metadata.date, excerpt=doc.excerpt)


@dataclass(frozen=True)
class ListingView:
    items: Tuple[ListingItem, ...] = ()
    sort_config: SortConfig = field(default_factory=SortConfig)

    @property
    def total_count(self) -> int:
        return len(self.items)


def listing_members(directory: PurePosixPath, documents: DocumentCollection) -> List[Document]:
    """Direct children of ``directory`` that are neither index nor listing pages."""
    return [
        doc for doc in documents.in_directory(directory) if not (doc.is_index or doc.is_listing)
    ]


def build_listing(directory: Union[str, PurePosixPath], documents: DocumentCollection) -> ListingView:
    """Collect, sort and summarise the documents listed in ``directory``."""
    directory = PurePosixPath(directory)
    page = documents.listing_page(directory) or documents.index_for(directory)
    config = SortConfig.from_metadata(page.metadata) if page else SortConfig()
    members = sort_documents(listing_members(directory, documents), config)
    return ListingView(items=tuple(ListingItem.from_document(doc) for doc in members), sort_config=config)
