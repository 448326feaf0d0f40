from __future__ import annotations

from pathlib import Path

import pytest

from grove.config import BreadcrumbConfig, SiteConfig, TemplateConfig
from grove.errors import ConfigError


def test_defaults() -> None:
    config = SiteConfig()
    assert config.title == ""
    assert config.templates == TemplateConfig("page.html", "list.html")
    assert config.breadcrumb == BreadcrumbConfig(enabled=True, max_items=None)


def test_from_dict() -> None:
    config = SiteConfig.from_dict(
        {
            "site": {"title": "Garden", "footer_text": "Made by hand"},
            "templates": {"page_template": "base.html"},
            "breadcrumb": {"enabled": False, "max_items": 5},
        }
    )
    assert config.title == "Garden"
    assert config.footer_text == "Made by hand"
    assert config.templates.page_template == "base.html"
    assert config.templates.list_template == "list.html"
    assert config.breadcrumb == BreadcrumbConfig(enabled=False, max_items=5)


@pytest.mark.parametrize(
    "data",
    [
        {"site": "not a table"},
        {"site": {"title": 3}},
        {"breadcrumb": {"enabled": "yes"}},
        {"breadcrumb": {"max_items": True}},
        {"breadcrumb": {"max_items": -1}},
    ],
)
def test_invalid_values_rejected(data) -> None:
    with pytest.raises(ConfigError):
        SiteConfig.from_dict(data)


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert SiteConfig.from_toml(tmp_path / "grove.toml") == SiteConfig()


def test_from_toml(tmp_path: Path) -> None:
    path = tmp_path / "grove.toml"
    path.write_text('[site]\ntitle = "Garden"\n\n[breadcrumb]\nmax_items = 4\n', encoding="utf-8")
    config = SiteConfig.from_toml(path)
    assert config.title == "Garden"
    assert config.breadcrumb.max_items == 4


def test_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "grove.toml"
    path.write_text("[site\ntitle = ", encoding="utf-8")
    with pytest.raises(ConfigError):
        SiteConfig.from_toml(path)
