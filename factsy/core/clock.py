# -*- coding: utf-8 -*-
"""Injectable time source."""

from datetime import date, datetime
from typing import Callable


def _local_now() -> datetime:
    """Return the current process-local datetime (timezone-aware)."""
    return datetime.now().astimezone()


class Clock:
    """Reads the current time and calendar date.

    Services take a Clock instead of calling ``datetime.now`` so tests can
    pin "now" and "today".
    """

    def __init__(self, now: Callable[[], datetime] | None = None):
        self._now = now or _local_now

    def now(self) -> datetime:
        return self._now()

    def now_ms(self) -> int:
        """Current time as epoch milliseconds."""
        return int(self._now().timestamp() * 1000)

    def today(self) -> date:
        """Current process-local calendar date."""
        return self._now().date()
