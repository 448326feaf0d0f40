"""Site configuration loaded from ``grove.toml``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigError

CONFIG_FILENAME = "grove.toml"
DEFAULT_PAGE_TEMPLATE = "page.html"
DEFAULT_LIST_TEMPLATE = "list.html"


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _typed(section: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = section.get(key, default)
    # bool is an int subclass; keep them apart
    if value is not None and (not isinstance(value, kind) or (kind is int and isinstance(value, bool))):
        raise ConfigError(f"'{key}' must be of type {kind.__name__}, got {value!r}")
    return value


@dataclass(frozen=True)
class BreadcrumbConfig:
    enabled: bool = True
    max_items: Optional[int] = None


@dataclass(frozen=True)
class TemplateConfig:
    page_template: str = DEFAULT_PAGE_TEMPLATE
    list_template: str = DEFAULT_LIST_TEMPLATE


@dataclass(frozen=True)
class SiteConfig:
    title: str = ""
    footer_text: Optional[str] = None
    templates: TemplateConfig = field(default_factory=TemplateConfig)
    breadcrumb: BreadcrumbConfig = field(default_factory=BreadcrumbConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteConfig":
        """Create config from a decoded TOML document."""
        site = _section(data, "site")
        templates = _section(data, "templates")
        breadcrumb = _section(data, "breadcrumb")

        max_items = _typed(breadcrumb, "max_items", int, None)
        if max_items is not None and max_items < 0:
            raise ConfigError("'max_items' must not be negative")

        return cls(
            title=_typed(site, "title", str, ""),
            footer_text=_typed(site, "footer_text", str, None),
            templates=TemplateConfig(
                page_template=_typed(templates, "page_template", str, DEFAULT_PAGE_TEMPLATE),
                list_template=_typed(templates, "list_template", str, DEFAULT_LIST_TEMPLATE),
            ),
            breadcrumb=BreadcrumbConfig(
                enabled=_typed(breadcrumb, "enabled", bool, True),
                max_items=max_items,
            ),
        )

    @classmethod
    def from_toml(cls, path: Path) -> "SiteConfig":
        """Load configuration from a TOML file; a missing file yields defaults."""
        if not path.exists():
            return cls()
        try:
            with path.open("rb") as fh:
                data = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc
        return cls.from_dict(data)
