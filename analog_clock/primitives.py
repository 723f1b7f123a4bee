"""
Drawing Primitives

Value types emitted by the frame renderer and consumed by a rasterizer.
A fresh list is produced for every frame; nothing here is retained.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .geometry import Point


class CapStyle(Enum):
    BUTT = "butt"
    ROUND = "round"


@dataclass(frozen=True)
class FilledCircle:
    center: Point
    radius: float
    color: int

    @property
    def is_degenerate(self) -> bool:
        return self.radius <= 0


@dataclass(frozen=True)
class StrokedCircle:
    """Circle outline; the stroke is centered on the radius"""
    center: Point
    radius: float
    stroke_width: float
    color: int

    @property
    def is_degenerate(self) -> bool:
        return self.radius <= 0 or self.stroke_width <= 0


@dataclass(frozen=True)
class Dot:
    """Small filled circle (minute/second marks)"""
    center: Point
    radius: float
    color: int

    @property
    def is_degenerate(self) -> bool:
        return self.radius <= 0


@dataclass(frozen=True)
class Text:
    """Text horizontally centered on the baseline point"""
    content: str
    baseline: Point
    color: int
    font_size: float

    @property
    def is_degenerate(self) -> bool:
        return not self.content or self.font_size <= 0


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    stroke_width: float
    color: int
    cap: CapStyle = CapStyle.BUTT

    @property
    def length(self) -> float:
        return ((self.end.x - self.start.x) ** 2 + (self.end.y - self.start.y) ** 2) ** 0.5

    @property
    def is_degenerate(self) -> bool:
        return self.length == 0 or self.stroke_width <= 0


Primitive = Union[FilledCircle, StrokedCircle, Dot, Text, Line]
