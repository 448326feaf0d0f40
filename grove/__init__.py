"""grove: turn a folder of Markdown documents into a static HTML site."""

from .breadcrumbs import BreadcrumbItem, resolve_breadcrumbs
from .config import BreadcrumbConfig, SiteConfig
from .document import Document, DocumentCollection, assemble_markdown, assemble_parsed
from .frontmatter import Metadata, split_header
from .listing import ListingItem, ListingView, build_listing
from .pipeline import SiteBuilder, SiteContent
from .plugins import ContentParser, ParsedContent, PluginRegistry
from .sorting import SortConfig, sort_documents

__all__ = [
    "BreadcrumbConfig",
    "BreadcrumbItem",
    "ContentParser",
    "Document",
    "DocumentCollection",
    "ListingItem",
    "ListingView",
    "Metadata",
    "ParsedContent",
    "PluginRegistry",
    "SiteBuilder",
    "SiteConfig",
    "SiteContent",
    "SortConfig",
    "assemble_markdown",
    "assemble_parsed",
    "build_listing",
    "resolve_breadcrumbs",
    "sort_documents",
    "split_header",
]
