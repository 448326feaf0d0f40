"""Generation pass: discover, ingest every document, then cross-reference.

Listings and breadcrumbs read sibling and ancestor documents, so they are only
computed once every document has been ingested. A failing document is recorded
and skipped; the run only fails when nothing could be ingested.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional, Tuple

from .breadcrumbs import BreadcrumbTrail, resolve_breadcrumbs
from .config import SiteConfig
from .document import (
    MARKDOWN_EXTENSIONS,
    Document,
    DocumentCollection,
    assemble_markdown,
    assemble_parsed,
    is_markdown_path,
)
from .errors import GenerationError, GroveError, OutputConflictError, SourceReadError
from .listing import ListingView, build_listing
from .plugins import PluginRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentFailure:
    source_path: PurePosixPath
    error: GroveError


@dataclass
class SiteContent:
    documents: DocumentCollection
    listings: Dict[PurePosixPath, ListingView] = field(default_factory=dict)
    breadcrumbs: Dict[PurePosixPath, Optional[BreadcrumbTrail]] = field(default_factory=dict)
    failures: List[DocumentFailure] = field(default_factory=list)


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Cannot read {path}: {exc}") from exc


def _output_rank(doc: Document) -> Tuple[bool, str]:
    return (not is_markdown_path(doc.source_path), doc.filename)


def _conflict(loser: Document, winner: Document) -> DocumentFailure:
    error = OutputConflictError(
        f"{loser.source_path} and {winner.source_path} both render to {winner.url}.html; "
        f"keeping {winner.source_path}"
    )
    logger.warning("Skipping %s: %s", loser.source_path, error)
    return DocumentFailure(loser.source_path, error)


class SiteBuilder:
    """Turns a content directory into a resolved, cross-referenced SiteContent."""

    def __init__(
        self,
        input_root: Path,
        config: Optional[SiteConfig] = None,
        registry: Optional[PluginRegistry] = None,
    ):
        self.input_root = input_root
        self.config = config or SiteConfig()
        self.registry = registry or PluginRegistry()

    def supported_extensions(self) -> List[str]:
        extensions = {ext.lstrip(".") for ext in MARKDOWN_EXTENSIONS}
        extensions.update(self.registry.supported_extensions())
        return sorted(extensions)

    def is_content_file(self, path: Path) -> bool:
        return path.suffix.lower().lstrip(".") in self.supported_extensions()

    # -- discovery --
    def discover(self) -> List[Path]:
        """Content files under the input root, hidden entries skipped."""
        found: List[Path] = []
        for dirpath, dirnames, filenames in os.walk(self.input_root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for fname in sorted(filenames):
                if fname.startswith("."):
                    continue
                path = Path(dirpath) / fname
                if self.is_content_file(path):
                    found.append(path)
        logger.debug("Discovered %d content files under %s", len(found), self.input_root)
        return found

    # -- ingestion --
    def relative_path(self, path: Path) -> PurePosixPath:
        return PurePosixPath(path.relative_to(self.input_root).as_posix())

    def ingest(self, path: Path) -> Document:
        """Read and assemble a single document."""
        rel = self.relative_path(path)
        text = read_source(path)
        if is_markdown_path(rel):
            return assemble_markdown(text, rel)
        parser = self.registry.find_parser(rel)
        if parser is None:
            raise SourceReadError(f"No parser registered for {rel}")
        return assemble_parsed(parser.parse(text, rel), rel)

    def ingest_all(self, paths: List[Path]) -> Tuple[DocumentCollection, List[DocumentFailure]]:
        """Ingest every path, keeping one document per output page.

        When two sources share a url the Markdown one wins, then the first by
        filename; the other is recorded as a failure.
        """
        pages: Dict[str, Document] = {}
        failures: List[DocumentFailure] = []
        for path in paths:
            try:
                doc = self.ingest(path)
            except GroveError as exc:
                rel = self.relative_path(path)
                logger.warning("Skipping %s: %s", rel, exc)
                failures.append(DocumentFailure(rel, exc))
                continue

            other = pages.get(doc.url)
            if other is None:
                pages[doc.url] = doc
            elif _output_rank(other) <= _output_rank(doc):
                failures.append(_conflict(doc, other))
            else:
                failures.append(_conflict(other, doc))
                pages[doc.url] = doc
        return DocumentCollection(list(pages.values())), failures

    # -- cross-referencing --
    def build(self) -> SiteContent:
        collection, failures = self.ingest_all(self.discover())
        if not collection:
            raise GenerationError(f"No documents could be generated from {self.input_root}")

        content = SiteContent(documents=collection, failures=failures)
        for directory in collection.listing_directories():
            content.listings[directory] = build_listing(directory, collection)
        for rel, doc in collection.items():
            content.breadcrumbs[rel] = resolve_breadcrumbs(doc, collection, self.config.breadcrumb)

        logger.info(
            "Ingested %d documents (%d listings, %d failures)",
            len(collection),
            len(content.listings),
            len(failures),
        )
        return content
