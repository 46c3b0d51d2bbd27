"""Pomodoro timer - waits out a focus session, then signals completion."""

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger

from .errors import InvalidInputError

logger = logging.getLogger(__name__)


class PomodoroSession:
    """A single running timer. Completes once, or is cancelled."""

    def __init__(self, task_text: str, on_complete: Callable[[str], None] | None = None):
        self.task_text = task_text
        self.on_complete = on_complete
        self.job = None
        self.cancelled = False
        self.fired = False
        self._finished = threading.Event()
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._finished.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the session completes. Returns False on timeout."""
        return self._finished.wait(timeout)

    def cancel(self) -> bool:
        """Stop the timer. Returns False if it already completed or was cancelled."""
        with self._lock:
            if self.fired or self.cancelled:
                return False
            self.cancelled = True

        try:
            self.job.remove()
        except JobLookupError:
            pass  # fired between the check above and removal; _fire sees cancelled
        logger.info(f"Pomodoro cancelled: {self.task_text}")
        return True

    def _fire(self) -> None:
        with self._lock:
            if self.cancelled:
                return
            self.fired = True

        logger.info(f"Pomodoro complete: {self.task_text}")
        try:
            if self.on_complete is not None:
                self.on_complete(self.task_text)
        except Exception as e:
            # Listener may be gone (e.g. window closed); the timer itself still finished
            logger.error(f"Pomodoro completion callback failed: {e}")
        finally:
            self._finished.set()


class PomodoroTimer:
    """Schedules pomodoro sessions on a background scheduler."""

    def __init__(self, scheduler: BackgroundScheduler | None = None):
        self.scheduler = scheduler or BackgroundScheduler()

    def start(
        self,
        duration: timedelta | float,
        task_text: str,
        on_complete: Callable[[str], None] | None = None,
    ) -> PomodoroSession:
        """Start a session that completes after duration (timedelta or seconds)."""
        if not isinstance(duration, timedelta):
            duration = timedelta(seconds=duration)
        if duration <= timedelta(0):
            raise InvalidInputError(f"Pomodoro duration must be positive, got {duration}")

        if not self.scheduler.running:
            self.scheduler.start()

        session = PomodoroSession(task_text, on_complete)
        run_at = datetime.now().astimezone() + duration
        session.job = self.scheduler.add_job(
            session._fire,
            DateTrigger(run_date=run_at),
            misfire_grace_time=None,
        )
        logger.info(f"Pomodoro started for {duration}: {task_text}")
        return session

    def shutdown(self) -> None:
        """Stop the scheduler, dropping any pending sessions."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
