# -*- coding: utf-8 -*-
"""Background scheduler for delayed jobs.

This module wraps APScheduler for the one-shot delayed jobs the search
session needs, such as debounced suggestion generation.
"""

import logging
from datetime import datetime
from typing import Callable

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, JobExecutionEvent
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger

logger = logging.getLogger(__name__)


class SchedulerService:
    """Service for scheduling one-shot delayed jobs.

    Jobs are identified by id; scheduling a job under an id that is
    already pending replaces it.

    Example:
        ```python
        scheduler = SchedulerService()
        scheduler.start()
        scheduler.add_date_job(
            job_id="suggestions",
            func=generate,
            run_date=datetime.now().astimezone() + timedelta(milliseconds=300),
        )
        ```
    """

    def __init__(self):
        """Initialize the scheduler service."""
        self._scheduler = BackgroundScheduler(
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": 5,
            }
        )
        self._scheduler.add_listener(
            self._job_listener,
            EVENT_JOB_EXECUTED | EVENT_JOB_ERROR
        )

    def _job_listener(self, event: JobExecutionEvent):
        """Log job failures."""
        if event.exception:
            logger.error(f"Job {event.job_id} failed: {event.exception}")
        else:
            logger.debug(f"Job {event.job_id} executed")

    def add_date_job(
        self,
        job_id: str,
        func: Callable,
        run_date: datetime,
        args: tuple = (),
    ):
        """Schedule func to run once at run_date.

        Args:
            job_id: Unique identifier; a pending job with this id is replaced
            func: Function to execute
            run_date: When to run (timezone-aware)
            args: Positional arguments passed to the function
        """
        if not self._scheduler.running:
            # Before start, replace_existing is not applied to pending jobs
            self.remove_job(job_id)
        self._scheduler.add_job(
            func,
            trigger=DateTrigger(run_date=run_date),
            id=job_id,
            replace_existing=True,
            args=args,
        )

    def remove_job(self, job_id: str) -> bool:
        """Remove a pending job.

        Args:
            job_id: The job to remove

        Returns:
            True if a pending job was removed
        """
        try:
            self._scheduler.remove_job(job_id)
            return True
        except JobLookupError:
            return False

    def has_job(self, job_id: str) -> bool:
        """Check whether a job is pending."""
        return self._scheduler.get_job(job_id) is not None

    def start(self):
        """Start the scheduler."""
        if not self._scheduler.running:
            self._scheduler.start()
            logger.info("Scheduler started")

    def shutdown(self, wait: bool = True):
        """Shutdown the scheduler.

        Args:
            wait: Whether to wait for running jobs to complete
        """
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
            logger.info("Scheduler shutdown")

    def is_running(self) -> bool:
        """Check if the scheduler is running.

        Returns:
            True if running
        """
        return self._scheduler.running


# Singleton instance
_scheduler_instance: SchedulerService | None = None


def get_scheduler() -> SchedulerService:
    """Get the global scheduler instance.

    Returns:
        The singleton SchedulerService
    """
    global _scheduler_instance
    if _scheduler_instance is None:
        _scheduler_instance = SchedulerService()
    return _scheduler_instance


def reset_scheduler() -> None:
    """Shut down and drop the global scheduler."""
    global _scheduler_instance
    if _scheduler_instance is not None:
        _scheduler_instance.shutdown(wait=False)
    _scheduler_instance = None
