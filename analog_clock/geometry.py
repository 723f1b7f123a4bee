"""
Clock Geometry

Maps clock positions and time values to angles, and angles to points on
the clock face. Angle 0 points east (3 o'clock) and angles grow clockwise
because screen y grows downward.
"""

import math
from dataclasses import dataclass
from typing import ClassVar


START_ANGLE = -math.pi / 2   # rotates "3 o'clock" to "12 o'clock"
TICK_ANGLE = math.pi / 30    # one minute/second step (6 degrees)
NUMERAL_ANGLE = math.pi / 6  # one hour step (30 degrees)


@dataclass(frozen=True)
class Point:
    """2D point in surface coordinates"""
    x: float
    y: float


@dataclass(frozen=True)
class FontMetrics:
    """
    Font metrics for a given font size.

    Screen convention: ascent is negative (above the baseline),
    descent is positive (below the baseline).
    """
    ascent: float
    descent: float

    ZERO: ClassVar['FontMetrics']


FontMetrics.ZERO = FontMetrics(0.0, 0.0)


@dataclass(frozen=True)
class ClockGeometry:
    """Radius and center derived from the surface size"""
    radius: float = 0.0
    center_x: float = 0.0
    center_y: float = 0.0

    @classmethod
    def from_size(cls, width: float, height: float) -> 'ClockGeometry':
        """Derive geometry from surface dimensions"""
        width = max(0.0, float(width))
        height = max(0.0, float(height))
        return cls(
            radius=min(width, height) / 2,
            center_x=width / 2,
            center_y=height / 2,
        )

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)


def angle_for_tick(index: int) -> float:
    """Angle of one of the 60 minute/second dots"""
    return index * TICK_ANGLE


def angle_for_numeral(hour: int) -> float:
    """Angle of numeral 1..12, with 12 at the top"""
    return hour * NUMERAL_ANGLE + START_ANGLE


def point_on_circle(angle: float, radius: float, center: Point) -> Point:
    return Point(
        radius * math.cos(angle) + center.x,
        radius * math.sin(angle) + center.y,
    )


def numeral_baseline_adjustment(ascent: float, descent: float) -> float:
    """
    Offset to subtract from a numeral's anchor y so the glyphs are
    vertically centered on the anchor instead of sitting on it.
    """
    return (ascent + descent) / 2


def hour_hand_angle(hour: int, minute: int) -> float:
    """Hour hand sweeps continuously with the minutes (12-hour form)"""
    hour_with_minutes = hour * 60 + minute
    return hour_with_minutes / 60 * NUMERAL_ANGLE + START_ANGLE


def minute_hand_angle(minute: int) -> float:
    return minute * TICK_ANGLE + START_ANGLE


def second_hand_angle(second: int) -> float:
    return second * TICK_ANGLE + START_ANGLE
