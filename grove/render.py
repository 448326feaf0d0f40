"""Writing resolved documents out as HTML pages."""

from __future__ import annotations

import logging
import os
import posixpath
import shutil
from pathlib import Path, PurePosixPath
from typing import Callable, List, Optional

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, select_autoescape

from .assets import DEFAULT_TEMPLATES
from .config import SiteConfig
from .document import Document
from .pipeline import SiteContent

logger = logging.getLogger(__name__)


# -- links --
def _relative(target: str, current_url: str) -> str:
    start = posixpath.dirname(current_url) or "."
    return posixpath.relpath(target, start=start)


def href(url: str, current_url: str = "") -> str:
    """Link from the page at ``current_url`` to the document at ``url``."""
    return _relative(f"{url}.html", current_url)


def dir_href(url: str, current_url: str = "") -> str:
    """Link from the page at ``current_url`` to a directory's index page."""
    return _relative(posixpath.join(url, "index.html") if url else "index.html", current_url)


def output_path(output_root: Path, doc: Document) -> Path:
    """Map a document to its output HTML path."""
    return output_root / PurePosixPath(f"{doc.url}.html")


def create_environment(templates_dir: Optional[Path] = None) -> Environment:
    loaders: List = []
    if templates_dir is not None and templates_dir.is_dir():
        loaders.append(FileSystemLoader(str(templates_dir)))
    loaders.append(DictLoader(dict(DEFAULT_TEMPLATES)))
    env = Environment(loader=ChoiceLoader(loaders), autoescape=select_autoescape(["html"]))
    env.filters["href"] = href
    env.filters["dir_href"] = dir_href
    return env


class SiteWriter:
    """Renders SiteContent into ``output_root``."""

    def __init__(self, output_root: Path, config: SiteConfig, templates_dir: Optional[Path] = None):
        self.output_root = output_root
        self.config = config
        self.env = create_environment(templates_dir)

    def template_for(self, doc: Document, content: SiteContent) -> str:
        if doc.metadata.custom_template:
            return doc.metadata.custom_template
        if doc.is_listing and doc.directory in content.listings:
            return self.config.templates.list_template
        return self.config.templates.page_template

    def render_document(self, doc: Document, content: SiteContent) -> str:
        template = self.env.get_template(self.template_for(doc, content))
        listing = content.listings.get(doc.directory) if doc.is_listing else None
        return template.render(
            page=doc,
            site=self.config,
            listing=listing,
            breadcrumbs=content.breadcrumbs.get(doc.source_path),
            current_url=doc.url,
        )

    def write(self, content: SiteContent) -> List[Path]:
        written: List[Path] = []
        for doc in content.documents.values():
            out_html_path = output_path(self.output_root, doc)
            out_html_path.parent.mkdir(parents=True, exist_ok=True)
            out_html_path.write_text(self.render_document(doc, content), encoding="utf-8")
            written.append(out_html_path)
        logger.info("Wrote %d pages to %s", len(written), self.output_root)
        return written


# -- static assets --
def copy_assets(input_root: Path, output_root: Path, is_content: Callable[[Path], bool]) -> int:
    """Copy all non-content files, preserving structure."""
    copied = 0
    for dirpath, dirnames, filenames in os.walk(input_root):
        dirnames[:] = [d for d in dirnames if not d.startswith(".")]
        for fname in filenames:
            src = Path(dirpath) / fname
            if fname.startswith(".") or is_content(src):
                continue
            dst = output_root / src.relative_to(input_root)
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
            copied += 1
    return copied
