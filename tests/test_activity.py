from __future__ import annotations

import pytest

from gitsim.activity import ActivityLog


def test_activity_log_keeps_most_recent_entries() -> None:
    log = ActivityLog(limit=3)

    for index in range(5):
        log.append(f"event {index}")

    assert [entry.message for entry in log.entries()] == ["event 2", "event 3", "event 4"]
    assert [entry.message for entry in log.recent()] == ["event 4", "event 3", "event 2"]


def test_activity_log_clear() -> None:
    log = ActivityLog()
    log.append("Staged README.md")

    log.clear()

    assert log.entries() == []


def test_activity_log_rejects_invalid_limit() -> None:
    with pytest.raises(ValueError):
        ActivityLog(limit=0)
