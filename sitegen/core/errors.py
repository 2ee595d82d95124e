"""Bounded error accumulator shared by one build run."""

from __future__ import annotations

import logging
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_MAX_ERRORS = 100


class ErrorLog:
    """Ordered, append-only collection of diagnostic messages.

    Holds at most ``capacity`` entries. Messages added once the log is full are
    dropped (the newest entries are discarded, earlier ones are kept).
    """

    def __init__(self, capacity: int = DEFAULT_MAX_ERRORS) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries: list[str] = []
        self._dropped = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dropped(self) -> int:
        """Number of messages discarded because the log was full."""
        return self._dropped

    def add(self, message: str) -> bool:
        """Append a message.

        Args:
            message: Human-readable diagnostic

        Returns:
            True if the message was stored, False if it was dropped
        """
        if len(self._entries) >= self._capacity:
            self._dropped += 1
            logger.debug(f"Error log full, dropped: {message}")
            return False
        self._entries.append(message)
        logger.debug(message)
        return True

    def messages(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"ErrorLog(entries={len(self._entries)}, capacity={self._capacity})"
