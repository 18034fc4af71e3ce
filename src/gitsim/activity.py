"""Bounded in-memory log of notable simulator activity."""

from __future__ import annotations

import time
from dataclasses import dataclass

DEFAULT_ACTIVITY_LIMIT = 60


@dataclass(frozen=True)
class ActivityEntry:
    """A single activity record.

    Attributes:
        timestamp: Unix timestamp in seconds.
        message: Short description such as ``Staged README.md``.
    """

    timestamp: float
    message: str


class ActivityLog:
    """Stores the most recent activity entries, oldest first."""

    def __init__(self, limit: int = DEFAULT_ACTIVITY_LIMIT) -> None:
        """Initialize an empty log.

        Args:
            limit: Maximum number of entries retained.
        """

        if limit < 1:
            raise ValueError("Activity limit must be at least 1.")
        self._limit = limit
        self._entries: list[ActivityEntry] = []

    def append(self, message: str) -> ActivityEntry:
        """Record a message, dropping the oldest entry past the limit."""

        entry = ActivityEntry(timestamp=time.time(), message=message)
        self._entries.append(entry)
        del self._entries[: -self._limit]
        return entry

    def entries(self) -> list[ActivityEntry]:
        """Return retained entries, oldest first."""

        return list(self._entries)

    def recent(self) -> list[ActivityEntry]:
        """Return retained entries, newest first."""

        return list(reversed(self._entries))

    def clear(self) -> None:
        self._entries.clear()
