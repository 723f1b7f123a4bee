"""
Frame Renderer

Turns the current geometry, style and time sample into the ordered list of
drawing primitives for one frame. Later primitives paint over earlier ones:
face, border, numerals, dots, hour hand, minute hand, second hand.
"""

from typing import Callable, List, Optional

from .geometry import (
    ClockGeometry,
    FontMetrics,
    Point,
    angle_for_numeral,
    angle_for_tick,
    hour_hand_angle,
    minute_hand_angle,
    numeral_baseline_adjustment,
    point_on_circle,
    second_hand_angle,
)
from .primitives import CapStyle, Dot, FilledCircle, Line, Primitive, StrokedCircle, Text
from .style import ClockStyle
from .time_sample import TimeSample

MetricsProvider = Callable[[float], FontMetrics]


def _zero_metrics(font_size: float) -> FontMetrics:
    return FontMetrics.ZERO


class FrameRenderer:
    """Stateless producer of clock frames"""

    def __init__(self, metrics_for_size: Optional[MetricsProvider] = None):
        self.metrics_for_size = metrics_for_size or _zero_metrics

    def render(self, geometry: ClockGeometry, style: ClockStyle,
               sample: TimeSample) -> List[Primitive]:
        """Emit all primitives for one frame"""
        frame: List[Primitive] = []
        frame.append(self._face(geometry, style))
        frame.append(self._border(geometry, style))
        frame.extend(self._numerals(geometry, style))
        frame.extend(self._dots(geometry, style))
        frame.extend(self._hands(geometry, style, sample))
        return frame

    def _face(self, geometry: ClockGeometry, style: ClockStyle) -> FilledCircle:
        return FilledCircle(geometry.center, geometry.radius, style.clock_face_background_color)

    def _border(self, geometry: ClockGeometry, style: ClockStyle) -> StrokedCircle:
        stroke_width = geometry.radius / 10
        # Keep the stroke inside the surface bounds
        border_radius = geometry.radius - stroke_width / 2
        return StrokedCircle(geometry.center, border_radius, stroke_width, style.border_color)

    def _numerals(self, geometry: ClockGeometry, style: ClockStyle) -> List[Text]:
        font_size = geometry.radius / 4
        metrics = self.metrics_for_size(font_size)
        baseline_offset = numeral_baseline_adjustment(metrics.ascent, metrics.descent)
        numeral_radius = geometry.radius * 11 / 16

        numerals = []
        for hour in range(1, 13):
            anchor = point_on_circle(angle_for_numeral(hour), numeral_radius, geometry.center)
            baseline = Point(anchor.x, anchor.y - baseline_offset)
            numerals.append(Text(str(hour), baseline, style.number_color, font_size))
        return numerals

    def _dots(self, geometry: ClockGeometry, style: ClockStyle) -> List[Dot]:
        dot_line_radius = geometry.radius * 5 / 6
        dot_radius = geometry.radius / 50
        return [
            Dot(point_on_circle(angle_for_tick(i), dot_line_radius, geometry.center),
                dot_radius, style.dot_color)
            for i in range(60)
        ]

    def _hands(self, geometry: ClockGeometry, style: ClockStyle,
               sample: TimeSample) -> List[Line]:
        center = geometry.center
        radius = geometry.radius

        hour_tip = point_on_circle(hour_hand_angle(sample.hour, sample.minute), radius / 3, center)
        minute_tip = point_on_circle(minute_hand_angle(sample.minute), radius / 2, center)
        second_tip = point_on_circle(second_hand_angle(sample.second), radius * 5 / 8, center)

        return [
            Line(hour_tip, center, radius / 20, style.hour_hand_color, CapStyle.ROUND),
            Line(minute_tip, center, radius / 30, style.minute_hand_color, CapStyle.ROUND),
            Line(second_tip, center, radius / 40, style.second_hand_color, CapStyle.ROUND),
        ]
