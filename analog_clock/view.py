"""
ClockView - analog clock surface

Binds geometry, style, renderer and redraw scheduler behind the
DrawableSurface interface. All calls are expected on the host's UI/event
thread; the style is swapped as a whole between frames.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .geometry import ClockGeometry, FontMetrics
from .primitives import Primitive
from .renderer import FrameRenderer
from .scheduler import REFRESH_PERIOD_MS, RedrawScheduler, ScheduleCallback
from .state import restore_state, save_state
from .style import ClockStyle
from .surface import DrawableSurface
from .time_sample import TimeSample, local_time_sample

DEFAULT_CLOCK_SIZE_PX = 300


class ClockView(DrawableSurface):
    """Analog clock that redraws itself every refresh period"""

    def __init__(self, schedule_callback: ScheduleCallback, invalidate: Callable[[], None],
                 style: Optional[ClockStyle] = None,
                 clock: Callable[[], TimeSample] = local_time_sample,
                 font_metrics: Optional[Callable[[float], FontMetrics]] = None,
                 refresh_period_ms: int = REFRESH_PERIOD_MS,
                 default_size_px: int = DEFAULT_CLOCK_SIZE_PX):
        """
        Args:
            schedule_callback: Host deferred-invocation primitive (delay_ms, fn)
            invalidate: Host hook asking for a new frame
            style: Initial colors (theme defaults if None)
            clock: Local wall-clock reader
            font_metrics: Metrics of the numeral font for a given size
            refresh_period_ms: Delay between frames
            default_size_px: Preferred size when unconstrained
        """
        self._default_style = style or ClockStyle()
        self._style = self._default_style
        self._geometry = ClockGeometry()
        self._clock = clock
        self._renderer = FrameRenderer(font_metrics)
        self.default_size_px = default_size_px
        self.scheduler = RedrawScheduler(schedule_callback, invalidate, refresh_period_ms)
        self.last_sample: Optional[TimeSample] = None

    # --- Style ---------------------------------------------------------------

    @property
    def style(self) -> ClockStyle:
        return self._style

    @style.setter
    def style(self, style: ClockStyle) -> None:
        self._style = style

    def set_style(self, **options: Any) -> ClockStyle:
        """Apply style options (public names or field names)"""
        self._style = self._style.replace(**options)
        return self._style

    def _color_property(field_name: str):
        def getter(self) -> int:
            return getattr(self._style, field_name)

        def setter(self, value: Any) -> None:
            self._style = self._style.replace(**{field_name: value})

        return property(getter, setter)

    clock_face_background_color = _color_property("clock_face_background_color")
    border_color = _color_property("border_color")
    number_color = _color_property("number_color")
    dot_color = _color_property("dot_color")
    hour_hand_color = _color_property("hour_hand_color")
    minute_hand_color = _color_property("minute_hand_color")
    second_hand_color = _color_property("second_hand_color")

    del _color_property

    # --- DrawableSurface -----------------------------------------------------

    @property
    def geometry(self) -> ClockGeometry:
        return self._geometry

    def on_size_changed(self, width: int, height: int) -> None:
        self._geometry = ClockGeometry.from_size(width, height)
        logging.debug(f"Clock resized to {width}x{height}, radius {self._geometry.radius}")

    def on_frame_requested(self) -> List[Primitive]:
        frame = self.compose_frame()
        self.scheduler.frame_drawn()
        return frame

    def compose_frame(self) -> List[Primitive]:
        """Build a frame from a fresh time sample without arming a redraw"""
        sample = self._clock()
        self.last_sample = sample
        return self._renderer.render(self._geometry, self._style, sample)

    def preferred_size(self) -> Tuple[int, int]:
        return self.default_size_px, self.default_size_px

    def save_state(self, view_state: Any = None) -> Dict[str, Any]:
        return save_state(self._geometry.radius, self._style, view_state)

    def restore_state(self, state: Any) -> Any:
        geometry = self._geometry
        max_radius = None
        if geometry.center_x > 0 and geometry.center_y > 0:
            max_radius = min(geometry.center_x, geometry.center_y)
        radius, style, view_state = restore_state(state, self._default_style, max_radius)
        self._style = style
        self._geometry = ClockGeometry(radius, geometry.center_x, geometry.center_y)
        return view_state
