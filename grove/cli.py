"""
Command line entry point: build a static site from a content folder.

Usage:
  grove --input ./content --output ./site

Notes:
- Site settings are read from grove.toml next to the content folder (or --config)
- Templates in --templates override the built-in page/list/breadcrumb templates
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import stat
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .config import CONFIG_FILENAME, SiteConfig
from .errors import ConfigError, GenerationError
from .pipeline import SiteBuilder
from .plugins import default_registry
from .render import SiteWriter, copy_assets


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a static site from a folder of Markdown documents.")
    parser.add_argument("--input", type=Path, default=Path("./content"), help="Content folder")
    parser.add_argument("--output", type=Path, default=Path("./site"), help="Output folder for generated site")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Site configuration file (default: {CONFIG_FILENAME} beside the content folder)",
    )
    parser.add_argument("--templates", type=Path, default=None, help="Folder with template overrides")
    parser.add_argument("--title", type=str, default="", help="Site title (overrides the config file)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _handle_remove_readonly(func, path, exc_info):  # Windows: clear read-only then retry
    os.chmod(path, stat.S_IWRITE)
    func(path)


def clean_output(output_root: Path) -> None:
    """Remove and recreate the output directory."""
    if output_root.exists():
        if sys.version_info >= (3, 12):
            shutil.rmtree(output_root, onexc=_handle_remove_readonly)
        else:
            shutil.rmtree(output_root, onerror=_handle_remove_readonly)
    output_root.mkdir(parents=True, exist_ok=True)


def load_config(args: argparse.Namespace, input_root: Path) -> SiteConfig:
    config_path = args.config or input_root.parent / CONFIG_FILENAME
    config = SiteConfig.from_toml(config_path)
    if args.title:
        config = replace(config, title=args.title)
    return config


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    input_root: Path = args.input.expanduser().resolve()
    output_root: Path = args.output.resolve()

    if not input_root.exists() or not input_root.is_dir():
        raise SystemExit(f"Input directory not found: {input_root}")

    try:
        config = load_config(args, input_root)
    except ConfigError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    templates_dir = args.templates or input_root.parent / "templates"
    builder = SiteBuilder(input_root, config=config, registry=default_registry())
    try:
        content = builder.build()
    except GenerationError as exc:
        raise SystemExit(str(exc)) from exc

    clean_output(output_root)
    copy_assets(input_root, output_root, builder.is_content_file)
    SiteWriter(output_root, config, templates_dir=templates_dir).write(content)

    for failure in content.failures:
        print(f"Skipped {failure.source_path}: {failure.error}")
    print(f"Site generated at: {output_root}")


if __name__ == "__main__":
    main()
