"""Shared fixtures for grove tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Union

import pytest


@pytest.fixture()
def write_tree(tmp_path: Path) -> Callable[[Dict[str, Union[str, bytes]]], Path]:
    """Create a content folder from a {relative path: content} mapping."""

    def _write(files: Dict[str, Union[str, bytes]]) -> Path:
        root = tmp_path / "content"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _write
