"""
Analog Clock for HSG Canvas
Geometry, frame rendering and self-rescheduling redraw of an analog clock face
"""

from .geometry import ClockGeometry, FontMetrics, Point
from .style import ClockStyle
from .config import ClockConfig, ClockPresets, load_clock_config
from .renderer import FrameRenderer
from .scheduler import RedrawScheduler, SchedulerState
from .surface import DrawableSurface, MeasureMode, MeasureSpec
from .time_sample import TimeSample, local_time_sample
from .view import ClockView
from .pil_canvas import PilCanvas

__all__ = [
    'ClockGeometry', 'FontMetrics', 'Point',
    'ClockStyle',
    'ClockConfig', 'ClockPresets', 'load_clock_config',
    'FrameRenderer',
    'RedrawScheduler', 'SchedulerState',
    'DrawableSurface', 'MeasureMode', 'MeasureSpec',
    'TimeSample', 'local_time_sample',
    'ClockView',
    'PilCanvas',
]
