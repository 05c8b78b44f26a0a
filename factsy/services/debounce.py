# -*- coding: utf-8 -*-
"""Single-flight debounce timer."""

import logging
from datetime import timedelta
from typing import Callable

from factsy.core.clock import Clock
from factsy.services.scheduler import SchedulerService

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 300


class Debouncer:
    """Runs a callback once input has been quiet for a delay.

    At most one callback is pending: every ``trigger`` replaces the
    previous one and restarts the delay.
    """

    def __init__(
        self,
        scheduler: SchedulerService,
        job_id: str,
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
        clock: Clock | None = None,
    ):
        """Initialize the debouncer.

        Args:
            scheduler: Scheduler that runs the delayed callback
            job_id: Scheduler job id owned by this debouncer
            delay_ms: Quiet period in milliseconds
            clock: Time source
        """
        self._scheduler = scheduler
        self._job_id = job_id
        self._delay = timedelta(milliseconds=delay_ms)
        self._clock = clock or Clock()

    def trigger(self, func: Callable, *args) -> None:
        """(Re)start the timer; func(*args) runs when it fires."""
        self._scheduler.add_date_job(
            job_id=self._job_id,
            func=func,
            run_date=self._clock.now() + self._delay,
            args=args,
        )

    def cancel(self) -> bool:
        """Drop the pending callback, if any.

        Returns:
            True if a callback was pending
        """
        cancelled = self._scheduler.remove_job(self._job_id)
        if cancelled:
            logger.debug(f"Cancelled pending {self._job_id} job")
        return cancelled

    @property
    def pending(self) -> bool:
        """Whether a callback is waiting to fire."""
        return self._scheduler.has_job(self._job_id)
