"""
Time Sample

One reading of the local wall clock, folded to 12-hour form.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TimeSample:
    hour: int    # 0..11
    minute: int  # 0..59
    second: int  # 0..59

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'TimeSample':
        return cls(hour=dt.hour % 12, minute=dt.minute, second=dt.second)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


def local_time_sample(now: Optional[datetime] = None) -> TimeSample:
    """Sample the host's local wall clock"""
    return TimeSample.from_datetime(now or datetime.now())
