"""Depth-first mirroring of a source tree into a destination tree."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from ..core.errors import ErrorLog
from ..core.models import BuildConfig
from ..rendering.engine import process_markup
from ..rendering.io import copy_file, ensure_dir

logger = logging.getLogger(__name__)

ProcessedCallback = Callable[[Path, Path], None]


def is_markup(name: str, suffix: str = ".html") -> bool:
    """Return True when ``name`` ends with the (case-sensitive) markup suffix."""
    return name.endswith(suffix)


def _list_entries(source_dir: Path) -> list[os.DirEntry]:
    with os.scandir(source_dir) as it:
        return sorted(it, key=lambda entry: entry.name)


def process_file(
    src_path: Path, dest_path: Path, errors: ErrorLog, config: BuildConfig
) -> bool:
    """Dispatch one file to the markup processor or the byte copier."""
    if is_markup(src_path.name, config.markup_suffix):
        return process_markup(src_path, dest_path, errors, mode=config.file_mode)
    return copy_file(
        src_path,
        dest_path,
        errors,
        chunk_size=config.chunk_size,
        mode=config.file_mode,
    )


def walk(
    source_dir: Path,
    dest_dir: Path,
    errors: ErrorLog,
    config: BuildConfig,
    on_processed: Optional[ProcessedCallback] = None,
) -> None:
    """Mirror ``source_dir`` into ``dest_dir``.

    Directories are recreated, markup files go through template inclusion and
    everything else is copied byte for byte. Failures are recorded in
    ``errors`` and only skip the affected file or directory.

    Args:
        source_dir: Directory to read
        dest_dir: Directory to write, created if missing
        errors: Error log for this run
        config: Build configuration
        on_processed: Called with (source, destination) after every file
    """
    try:
        entries = _list_entries(source_dir)
    except OSError:
        errors.add(f"Error opening directory: {source_dir}")
        return

    if not ensure_dir(dest_dir, errors, mode=config.dir_mode):
        return

    logger.debug(f"Walking {source_dir} ({len(entries)} entries)")

    for entry in entries:
        src_path = source_dir / entry.name
        dest_path = dest_dir / entry.name

        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False

        if is_dir:
            walk(src_path, dest_path, errors, config, on_processed)
            continue

        process_file(src_path, dest_path, errors, config)
        if on_processed is not None:
            on_processed(src_path, dest_path)
