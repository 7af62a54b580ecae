"""
Cancellable periodic tick built on the `schedule` library.

Every start() binds the job to the current epoch. cancel() removes the job and
bumps the epoch, so a callback that was already captured (for example by a
scheduler loop iterating over a snapshot of its jobs) sees a stale epoch and
returns CancelJob instead of touching post-reset state.
"""

import logging
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)


class TickScheduler:
    """Drives exactly one periodic job at a time."""

    def __init__(self, scheduler: Optional[schedule.Scheduler] = None):
        self.scheduler = scheduler or schedule.Scheduler()
        self.epoch = 0
        self.job: Optional[schedule.Job] = None

    @property
    def is_running(self) -> bool:
        return self.job is not None

    def start(self, interval_seconds: float, callback: Callable[[], None]) -> int:
        """Schedule callback every interval_seconds; returns the job's epoch."""
        self.cancel()
        epoch = self.epoch

        def _tick():
            if epoch != self.epoch:
                logger.debug(f"Dropping stale tick from epoch {epoch} (current {self.epoch})")
                return schedule.CancelJob
            callback()

        self.job = self.scheduler.every(interval_seconds).seconds.do(_tick)
        logger.debug(f"Tick scheduled every {interval_seconds:.3f}s (epoch {epoch})")
        return epoch

    def cancel(self) -> None:
        """Remove the pending job and invalidate its epoch."""
        if self.job is not None:
            self.scheduler.cancel_job(self.job)
            self.job = None
        self.epoch += 1

    def run_pending(self) -> None:
        self.scheduler.run_pending()

    def fire_now(self) -> None:
        """Run every registered job immediately, regardless of its next run time."""
        self.scheduler.run_all(delay_seconds=0)

    def idle_seconds(self) -> Optional[float]:
        """Seconds until the next tick is due, or None when nothing is scheduled."""
        return self.scheduler.idle_seconds
