from __future__ import annotations

import time
from datetime import UTC, datetime


class Clock:
    """Nanosecond wall clock that never repeats or goes backwards within a process.

    Document keys embed this value, so two reads must never return the same number.
    """

    def __init__(self) -> None:
        self._last_ns = 0

    def _read_ns(self) -> int:
        return time.time_ns()

    def now_ns(self) -> int:
        now = self._read_ns()
        if now <= self._last_ns:
            now = self._last_ns + 1
        self._last_ns = now
        return now


def ns_to_datetime(value_ns: int) -> datetime:
    return datetime.fromtimestamp(value_ns / 1_000_000_000, tz=UTC)
