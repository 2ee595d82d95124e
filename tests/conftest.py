"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitegen.core.errors import ErrorLog
from sitegen.core.models import BuildConfig


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    """Create files under ``root`` from a {relative path: content} mapping."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))


@pytest.fixture
def errors() -> ErrorLog:
    return ErrorLog()


@pytest.fixture
def site(tmp_path: Path) -> tuple[Path, Path]:
    """Return (source, destination) directories; only the source exists."""
    src = tmp_path / "src"
    src.mkdir()
    return src, tmp_path / "generated"


@pytest.fixture
def config(site: tuple[Path, Path]) -> BuildConfig:
    src, dest = site
    return BuildConfig(source_dir=src, dest_dir=dest)
