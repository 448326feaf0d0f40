"""Content parsers for source formats other than Markdown.

A parser is any object with a ``name`` and a ``parse(raw_text, source_path)``
method returning :class:`ParsedContent`. The registry maps file extensions to
parser instances; the pipeline wraps parser output into the same Document
model as native Markdown.
"""

from __future__ import annotations

import html
import json
import tomllib
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Dict, List, Optional, Protocol

from pydantic import ValidationError

from .converter import convert_markdown_to_html
from .errors import ContentParseError, PluginError
from .frontmatter import Metadata


@dataclass(frozen=True)
class ParsedContent:
    title: str
    metadata: Metadata
    html_content: str
    plain_text: Optional[str] = None
    extra: Dict[str, str] = field(default_factory=dict)


class ContentParser(Protocol):
    name: str

    def parse(self, raw_text: str, source_path: PurePath) -> ParsedContent: ...


def _normalize_extension(extension: str) -> str:
    return extension.lower().lstrip(".")


class PluginRegistry:
    """Extension -> parser lookup table."""

    def __init__(self) -> None:
        self._parsers: Dict[str, ContentParser] = {}
        self._extensions: Dict[str, str] = {}

    def register_parser(self, name: str, parser: ContentParser) -> "PluginRegistry":
        self._parsers[name] = parser
        return self

    def map_extension(self, extension: str, parser_name: str) -> "PluginRegistry":
        ext = _normalize_extension(extension)
        if parser_name not in self._parsers:
            raise PluginError(f"Parser '{parser_name}' not registered for extension '{ext}'")
        if ext in self._extensions:
            raise PluginError(f"Extension '{ext}' already mapped to parser '{self._extensions[ext]}'")
        self._extensions[ext] = parser_name
        return self

    def register(self, parser: ContentParser, *extensions: str) -> "PluginRegistry":
        self.register_parser(parser.name, parser)
        for extension in extensions:
            self.map_extension(extension, parser.name)
        return self

    def find_parser(self, path: PurePath) -> Optional[ContentParser]:
        name = self._extensions.get(_normalize_extension(path.suffix))
        return self._parsers[name] if name else None

    def supported_extensions(self) -> List[str]:
        return sorted(self._extensions)


# -- bundled parsers --
class TextParser:
    """Plain text: no header, blank-line separated paragraphs."""

    name = "text"

    def parse(self, raw_text: str, source_path: PurePath) -> ParsedContent:
        paragraphs = [p.strip() for p in raw_text.split("\n\n") if p.strip()]
        body = "\n".join(f"<p>{html.escape(p)}</p>" for p in paragraphs)
        return ParsedContent(title="", metadata=Metadata(), html_content=body, plain_text=raw_text)


def _looks_like_html(text: str) -> bool:
    stripped = text.strip()
    return stripped.startswith("<") and ("</" in stripped or "/>" in stripped)


class StructuredParser:
    """Shared handling for data files carrying header fields plus ``content``.

    Subclasses only decode ``raw_text`` into a mapping.
    """

    name = "structured"
    EXTRA_KEYS = ("description", "author")

    def decode(self, raw_text: str, source_path: PurePath) -> Any:
        raise NotImplementedError

    def parse(self, raw_text: str, source_path: PurePath) -> ParsedContent:
        data = self.decode(raw_text, source_path)
        if not isinstance(data, dict):
            raise ContentParseError(f"{source_path}: {self.name} document must map keys to values")

        try:
            metadata = Metadata.model_validate(data)
        except ValidationError as exc:
            raise ContentParseError(f"{source_path}: {exc}") from exc

        content = data.get("content", "")
        if not isinstance(content, str):
            raise ContentParseError(f"{source_path}: 'content' must be a string")
        html_content = content if _looks_like_html(content) else convert_markdown_to_html(content)

        extra = {key: str(data[key]) for key in self.EXTRA_KEYS if isinstance(data.get(key), str)}
        return ParsedContent(
            title=metadata.title or source_path.stem,
            metadata=metadata,
            html_content=html_content,
            extra=extra,
        )


class JsonParser(StructuredParser):
    """JSON object carrying the header fields plus a ``content`` field."""

    name = "json"

    def decode(self, raw_text: str, source_path: PurePath) -> Any:
        try:
            return json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise ContentParseError(f"{source_path}: invalid JSON: {exc}") from exc


class TomlParser(StructuredParser):
    """TOML document; ``content`` is usually a multi-line string."""

    name = "toml"

    def decode(self, raw_text: str, source_path: PurePath) -> Any:
        try:
            return tomllib.loads(raw_text)
        except tomllib.TOMLDecodeError as exc:
            raise ContentParseError(f"{source_path}: invalid TOML: {exc}") from exc


def default_registry() -> PluginRegistry:
    return (
        PluginRegistry()
        .register(TextParser(), "txt")
        .register(JsonParser(), "json")
        .register(TomlParser(), "toml")
    )
