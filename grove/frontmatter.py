"""Metadata header parsing.

A document may open with one header block, either TOML between ``+++`` fences
or YAML between ``---`` fences. The header's extent comes from the syntax tree;
the body is the original text sliced at that offset with leading whitespace
trimmed. Headers that do not decode under their dialect degrade to empty
metadata and leave the whole text as body.
"""

from __future__ import annotations

import datetime as dt
import logging
import tomllib
from dataclasses import dataclass
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .syntax import Node, header_node, parse_tree, source_offset

logger = logging.getLogger(__name__)


class Metadata(BaseModel):
    """Header fields; every field is optional."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    date: Optional[str] = None
    is_listing: bool = Field(default=False, alias="list")
    custom_template: Optional[str] = Field(default=None, alias="page_template")
    sort_field: Optional[str] = Field(default=None, alias="sort_by")
    sort_order: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    excerpt: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_as_text(cls, value: Any) -> Any:
        # TOML and YAML both decode bare dates natively
        if isinstance(value, (dt.date, dt.datetime)):
            return value.isoformat()
        return value

    @field_validator("is_listing", mode="before")
    @classmethod
    def _null_listing(cls, value: Any) -> Any:
        return False if value is None else value


class HeaderError(ValueError):
    """Header text does not decode under its dialect's schema."""


@dataclass(frozen=True)
class Header:
    metadata: Metadata
    body: str
    dialect: Optional[str] = None


def decode_header(raw: str, dialect: str) -> Metadata:
    """Decode raw header text; raise ``HeaderError`` on any failure."""
    try:
        if dialect == "toml":
            data = tomllib.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise HeaderError(f"invalid {dialect} header: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise HeaderError(f"{dialect} header is not a mapping")
    try:
        return Metadata.model_validate(data)
    except ValidationError as exc:
        raise HeaderError(f"{dialect} header does not match schema: {exc}") from exc


def split_header(text: str, nodes: Optional[List[Node]] = None, source: str = "<string>") -> Header:
    """Split ``text`` into metadata and body using the tree's header node."""
    if nodes is None:
        nodes = parse_tree(text)
    node = header_node(nodes)
    if node is None:
        return Header(Metadata(), text)

    dialect = node["attrs"]["dialect"]
    try:
        metadata = decode_header(node["raw"], dialect)
    except HeaderError as exc:
        logger.warning("%s: %s; using empty metadata", source, exc)
        return Header(Metadata(), text, dialect)

    end = source_offset(text, node["attrs"]["end"])
    if end >= len(text):
        return Header(metadata, "", dialect)
    return Header(metadata, text[end:].lstrip(), dialect)
