"""Shared fixtures: a recording host scheduler and a fixed wall clock."""

from __future__ import annotations

from typing import Callable, List, Tuple

import pytest

from analog_clock.time_sample import TimeSample


class RecordingHost:
    """Stands in for the host's deferred-callback primitive."""

    def __init__(self) -> None:
        self.requests: List[Tuple[int, Callable[[], None]]] = []
        self.invalidations = 0

    def schedule_callback(self, delay_ms: int, fn: Callable[[], None]) -> int:
        self.requests.append((delay_ms, fn))
        return len(self.requests)

    def invalidate(self) -> None:
        self.invalidations += 1

    def fire_next(self) -> None:
        _, fn = self.requests.pop(0)
        fn()


@pytest.fixture()
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture()
def fixed_time() -> TimeSample:
    return TimeSample(hour=10, minute=9, second=30)
