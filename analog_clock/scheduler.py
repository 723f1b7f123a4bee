"""
Redraw Scheduler

Keeps the clock live without an external driver: every drawn frame arms
exactly one deferred redraw request through the host's scheduling
primitive. Once drawing has started the scheduler stays SCHEDULED until the
host tears the surface down; cancelling the pending request is the host's
job.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional

REFRESH_PERIOD_MS = 180

ScheduleCallback = Callable[[int, Callable[[], None]], Any]


class SchedulerState(Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"


class RedrawScheduler:
    """Self re-arming redraw request"""

    def __init__(self, schedule_callback: ScheduleCallback, on_due: Callable[[], None],
                 period_ms: int = REFRESH_PERIOD_MS):
        """
        Args:
            schedule_callback: Host primitive, called as schedule_callback(delay_ms, fn)
            on_due: Invoked when a request fires (host invalidate)
            period_ms: Delay between a drawn frame and the next request
        """
        self._schedule_callback = schedule_callback
        self._on_due = on_due
        self.period_ms = period_ms

        self.state = SchedulerState.IDLE
        self.frames_drawn = 0
        self.rearm_count = 0
        self.fired_count = 0
        self._handle: Optional[Any] = None

    @property
    def pending_handle(self) -> Optional[Any]:
        """Whatever the host returned for the last request"""
        return self._handle

    def frame_drawn(self) -> None:
        """Record a completed frame and arm the next request"""
        self.frames_drawn += 1
        self._handle = self._schedule_callback(self.period_ms, self._fire)
        self.rearm_count += 1
        if self.state is SchedulerState.IDLE:
            logging.debug(f"Redraw loop started (period {self.period_ms} ms)")
        self.state = SchedulerState.SCHEDULED

    def _fire(self) -> None:
        self.fired_count += 1
        self._on_due()

    def reset(self) -> None:
        """Forget the pending request after the host tore the surface down"""
        self._handle = None
        self.state = SchedulerState.IDLE
