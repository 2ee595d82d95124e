"""Rebuild the site whenever the source tree changes."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

Snapshot = dict[str, tuple[int, int]]


def snapshot(root: Path) -> Snapshot:
    """Capture (mtime_ns, size) for every entry under ``root``.

    Unreadable directories and entries that vanish while scanning are left
    out; a missing root yields an empty snapshot.
    """
    state: Snapshot = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            path = os.path.join(dirpath, name)
            try:
                stat = os.stat(path)
            except OSError:
                continue
            state[os.path.relpath(path, root)] = (stat.st_mtime_ns, stat.st_size)
    return state


def watch(
    root: Path,
    rebuild: Callable[[], Any],
    *,
    interval: float = 0.5,
    stop: Optional[Callable[[], bool]] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run ``rebuild`` once, then again after every change under ``root``.

    Args:
        root: Source tree to poll
        rebuild: Called for the initial build and after each detected change
        interval: Seconds between polls
        stop: Checked before each poll; the loop ends when it returns True
        sleep: Sleep function, replaceable for tests

    Returns:
        Number of builds performed
    """
    builds = 0

    try:
        previous = snapshot(root)
        rebuild()
        builds += 1

        while stop is None or not stop():
            sleep(interval)
            current = snapshot(root)
            if current == previous:
                continue
            changed = sorted(set(current.items()) ^ set(previous.items()))
            logger.info(f"Change detected: {changed[0][0]}")
            logger.debug(f"{len(changed)} change(s) since last build")
            previous = current
            rebuild()
            builds += 1
    except KeyboardInterrupt:
        logger.info("Watch stopped")

    return builds
