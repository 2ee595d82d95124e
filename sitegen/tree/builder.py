"""Run a full site build and summarise it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..core.errors import ErrorLog
from ..core.models import BuildConfig, BuildReport, ProcessedFile
from .walker import ProcessedCallback, walk

logger = logging.getLogger(__name__)


def generate_site(
    config: BuildConfig, on_processed: Optional[ProcessedCallback] = None
) -> BuildReport:
    """Build the destination tree from the source tree.

    Args:
        config: Build configuration
        on_processed: Optional progress callback(source, destination)

    Returns:
        Report listing processed files and recorded errors
    """
    logger.info(f"Generating {config.dest_dir} from {config.source_dir}")

    errors = ErrorLog(capacity=config.max_errors)
    report = BuildReport()

    def record(src: Path, dest: Path) -> None:
        report.processed.append(ProcessedFile(source=src, destination=dest))
        if on_processed is not None:
            on_processed(src, dest)

    walk(config.source_dir, config.dest_dir, errors, config, record)

    report.errors = errors.messages()
    report.dropped_errors = errors.dropped
    logger.info(
        f"Processed {len(report.processed)} file(s) with {len(report.errors)} error(s)"
    )
    return report
