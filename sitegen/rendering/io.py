"""File I/O operations for site generation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.errors import ErrorLog

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096

# Text files are decoded with surrogateescape so bytes that are not valid
# UTF-8 are written back unchanged.
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


def ensure_dir(path: Path, errors: ErrorLog, mode: int = 0o755) -> bool:
    """Create a directory (and missing parents) if it does not exist.

    Args:
        path: Directory to create
        errors: Error log receiving a message on failure
        mode: Directory permissions (octal)

    Returns:
        True if the directory exists afterwards
    """
    try:
        path.mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as e:
        errors.add(f"Error creating directory: {path} ({e.strerror})")
        return False
    return True


def open_for_write(path: Path, mode: int = 0o644) -> int:
    """Open ``path`` write-only, creating or truncating it, and return the fd."""
    return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)


def copy_file(
    src_path: Path,
    dest_path: Path,
    errors: ErrorLog,
    *,
    chunk_size: int = CHUNK_SIZE,
    mode: int = 0o644,
) -> bool:
    """Copy a file byte for byte.

    A failed copy may leave a truncated destination behind.

    Args:
        src_path: File to read
        dest_path: File to create or overwrite
        errors: Error log receiving a message on failure
        chunk_size: Bytes read per iteration
        mode: Permissions for a newly created destination

    Returns:
        True if every byte was written
    """
    try:
        src = open(src_path, "rb", buffering=0)
    except OSError:
        errors.add(f"Error opening source file: {src_path}")
        return False

    with src:
        try:
            dest_fd = open_for_write(dest_path, mode)
        except OSError:
            errors.add(f"Error opening destination file: {dest_path}")
            return False

        with os.fdopen(dest_fd, "wb", buffering=0) as dest:
            try:
                while True:
                    chunk = src.read(chunk_size)
                    if not chunk:
                        break
                    written = dest.write(chunk)
                    if written != len(chunk):
                        errors.add(f"Error writing to file: {dest_path}")
                        return False
            except OSError as e:
                errors.add(f"Error writing to file: {dest_path} ({e.strerror})")
                return False

    logger.debug(f"Copied {src_path} → {dest_path}")
    return True
