"""Document model and per-file assembly."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Dict, Iterator, List, Optional, Union

from bs4 import BeautifulSoup

from .converter import finalize_html, render_markdown
from .extract import resolve_excerpt, resolve_title
from .frontmatter import Metadata, split_header
from .plugins import ParsedContent
from .syntax import body_nodes, parse_tree

logger = logging.getLogger(__name__)

PathLike = Union[str, PurePosixPath]

MARKDOWN_EXTENSIONS = {".md", ".markdown"}


@dataclass(frozen=True)
class Document:
    """One source file, fully resolved.

    Attributes:
        source_path: Path relative to the content root; identity of the document
        body: Rendered HTML
        metadata: Parsed header (empty record when absent or malformed)
        resolved_title: Metadata title, first H1, or file stem
        excerpt: Metadata excerpt or the first paragraph; None when nothing qualifies
        extra: Free-form string metadata supplied by plugin parsers
    """

    source_path: PurePosixPath
    body: str
    metadata: Metadata
    resolved_title: str
    excerpt: Optional[str] = None
    extra: Dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return self.source_path.with_suffix("").as_posix()

    @property
    def directory(self) -> PurePosixPath:
        return self.source_path.parent

    @property
    def filename(self) -> str:
        return self.source_path.name

    @property
    def is_index(self) -> bool:
        return self.source_path.stem == "index"

    @property
    def is_listing(self) -> bool:
        return self.metadata.is_listing


def is_markdown_path(path: PathLike) -> bool:
    return PurePosixPath(path).suffix.lower() in MARKDOWN_EXTENSIONS


# -- assembly --
def assemble_markdown(text: str, source_path: PathLike) -> Document:
    """Build a Document from Markdown source text.

    Raises ContentParseError when the tree cannot be built and
    UnsafeContentError when the rendered body carries denylisted elements.
    """
    source_path = PurePosixPath(source_path)
    tree = parse_tree(text)
    header = split_header(text, tree, source=str(source_path))
    nodes = body_nodes(tree)
    metadata = header.metadata

    return Document(
        source_path=source_path,
        body=render_markdown(header.body),
        metadata=metadata,
        resolved_title=resolve_title(metadata.title, nodes, source_path),
        excerpt=resolve_excerpt(metadata.excerpt, nodes=nodes),
    )


def assemble_parsed(parsed: ParsedContent, source_path: PathLike) -> Document:
    """Wrap plugin parser output into a Document."""
    source_path = PurePosixPath(source_path)
    metadata = parsed.metadata
    plain_text = parsed.plain_text
    if plain_text is None:
        plain_text = BeautifulSoup(parsed.html_content, "html.parser").get_text()

    title = metadata.title if metadata.title and metadata.title.strip() else parsed.title
    if not title or not title.strip():
        title = resolve_title(None, [], source_path)

    return Document(
        source_path=source_path,
        body=finalize_html(parsed.html_content),
        metadata=metadata,
        resolved_title=title,
        excerpt=resolve_excerpt(metadata.excerpt, plain_text=plain_text),
        extra=dict(parsed.extra),
    )


class DocumentCollection(Mapping):
    """Read-only mapping of relative source path -> Document."""

    def __init__(self, documents: Optional[List[Document]] = None):
        self._documents: Dict[PurePosixPath, Document] = {}
        for doc in documents or []:
            self._documents[doc.source_path] = doc

    def __getitem__(self, key: PathLike) -> Document:
        return self._documents[PurePosixPath(key)]

    def __iter__(self) -> Iterator[PurePosixPath]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def in_directory(self, directory: PathLike) -> List[Document]:
        """Direct children of ``directory`` (no recursion)."""
        directory = PurePosixPath(directory)
        return [doc for doc in self._documents.values() if doc.directory == directory]

    def index_for(self, directory: PathLike) -> Optional[Document]:
        """The index document of ``directory``, preferring Markdown sources."""
        candidates = [doc for doc in self.in_directory(directory) if doc.is_index]
        candidates.sort(key=lambda doc: (not is_markdown_path(doc.source_path), doc.filename))
        return candidates[0] if candidates else None

    def listing_page(self, directory: PathLike) -> Optional[Document]:
        """The document in ``directory`` flagged as a listing page."""
        pages = sorted(
            (doc for doc in self.in_directory(directory) if doc.is_listing),
            key=lambda doc: (not doc.is_index, doc.filename),
        )
        return pages[0] if pages else None

    def listing_directories(self) -> List[PurePosixPath]:
        return sorted({doc.directory for doc in self._documents.values() if doc.is_listing})
