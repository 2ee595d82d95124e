"""Template inclusion engine for markup files."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from ..core.errors import ErrorLog
from .io import TEXT_ENCODING, TEXT_ERRORS, open_for_write

logger = logging.getLogger(__name__)

TEMPLATE_PATTERN = re.compile(r"<!-- template: (.+?) -->")


def match_template(line: str) -> str | None:
    """Return the template name referenced on ``line``, if any."""
    match = TEMPLATE_PATTERN.search(line)
    return match.group(1) if match else None


def read_template(template_path: Path) -> str:
    """Read a template file verbatim.

    Raises:
        OSError: If the template cannot be opened or read
        ValueError: If the path contains a NUL character
    """
    with open(
        template_path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline=""
    ) as handle:
        return handle.read()


def resolve_line(
    line: str,
    base_dir: Path,
    errors: ErrorLog,
    *,
    referrer: Path | None = None,
    line_number: int | None = None,
) -> tuple[bool, str]:
    """Resolve a single template reference.

    Included contents are returned as-is and never scanned for further
    references, so inclusion is exactly one level deep.

    Args:
        line: Line of markup, including its line ending
        base_dir: Directory of the file being processed
        errors: Error log receiving missing-template warnings
        referrer: File containing the line, for diagnostics
        line_number: 1-based position of the line, for diagnostics

    Returns:
        Tuple of (matched, output text). A reference to a template that cannot
        be opened is still a match; its output text is the original line.
    """
    name = match_template(line)
    if name is None:
        return False, line

    template_path = base_dir / name
    try:
        content = read_template(template_path)
    except (OSError, ValueError):
        location = str(referrer if referrer is not None else base_dir)
        if line_number is not None:
            location = f"{location}:{line_number}"
        errors.add(f"Warning: Template {name} not found for {location}")
        return True, line

    logger.debug(f"Included {template_path}")
    return True, content


def process_markup(
    src_path: Path,
    dest_path: Path,
    errors: ErrorLog,
    *,
    mode: int = 0o644,
) -> bool:
    """Write ``src_path`` to ``dest_path`` with template references inlined.

    Args:
        src_path: Markup file to read
        dest_path: Output file, overwritten if present
        errors: Error log receiving open failures and template warnings
        mode: Permissions for a newly created output file

    Returns:
        True if the output file was fully written
    """
    try:
        src = open(
            src_path, "r", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline=""
        )
    except OSError:
        errors.add(f"Error opening input file: {src_path}")
        return False

    with src:
        try:
            dest_fd = open_for_write(dest_path, mode)
        except OSError:
            errors.add(f"Error opening output file: {dest_path}")
            return False

        base_dir = src_path.parent
        try:
            with os.fdopen(
                dest_fd, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline=""
            ) as dest:
                for line_number, line in enumerate(src, start=1):
                    _, text = resolve_line(
                        line,
                        base_dir,
                        errors,
                        referrer=src_path,
                        line_number=line_number,
                    )
                    dest.write(text)
        except (OSError, UnicodeError) as e:
            # Covers the final flush on close as well as per-line writes.
            errors.add(f"Error processing {src_path}: {e}")
            return False

    logger.debug(f"Processed markup {src_path} → {dest_path}")
    return True
