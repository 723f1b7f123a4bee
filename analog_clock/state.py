"""
Clock State Snapshot

Flat key-value snapshot of a clock surface so it can be recreated with
the same radius and colors. Keys are explicit, so entries can be restored
in any order.
"""

import logging
import math
from typing import Any, Dict, Mapping, Optional, Tuple

from .style import OPTION_NAMES, ClockStyle

CLOCK_STATE = "clockState"
CLOCK_RADIUS = "clockRadius"
CLOCK_FACE_BACKGROUND_COLOR = "clockFaceBackgroundColor"
BORDER_COLOR = "borderColor"
NUMBER_COLOR = "numberColor"
DOT_COLOR = "dotColor"
HOUR_HAND_COLOR = "hourHandColor"
MINUTE_HAND_COLOR = "minuteHandColor"
SECOND_HAND_COLOR = "secondHandColor"

# Largest radius a snapshot may carry (an 8192 px surface)
MAX_CLOCK_RADIUS = 4096.0

COLOR_KEYS = (
    CLOCK_FACE_BACKGROUND_COLOR,
    BORDER_COLOR,
    NUMBER_COLOR,
    DOT_COLOR,
    HOUR_HAND_COLOR,
    MINUTE_HAND_COLOR,
    SECOND_HAND_COLOR,
)


def save_state(radius: float, style: ClockStyle, view_state: Any = None) -> Dict[str, Any]:
    """Serialize radius, colors and the host's own view state"""
    snapshot: Dict[str, Any] = {
        CLOCK_STATE: view_state,
        CLOCK_RADIUS: float(radius),
    }
    for key in COLOR_KEYS:
        snapshot[key] = getattr(style, OPTION_NAMES[key])
    return snapshot


def restore_state(snapshot: Any,
                  defaults: Optional[ClockStyle] = None,
                  max_radius: Optional[float] = None) -> Tuple[float, ClockStyle, Any]:
    """
    Restore (radius, style, view_state) from a snapshot.

    Never raises: a missing or corrupt entry falls back to its default,
    and anything that is not a mapping restores pure defaults.

    Args:
        snapshot: Mapping produced by save_state
        defaults: Colors used for missing or invalid entries
        max_radius: Largest radius that fits the current surface, if sized
    """
    defaults = defaults or ClockStyle()
    if not isinstance(snapshot, Mapping):
        if snapshot is not None:
            logging.warning(f"Ignoring clock snapshot of type {type(snapshot).__name__}")
        return 0.0, defaults, None

    radius = _restore_radius(snapshot.get(CLOCK_RADIUS), max_radius)
    colors = {key: snapshot.get(key) for key in COLOR_KEYS}
    style = defaults.replace(**colors)
    return radius, style, snapshot.get(CLOCK_STATE)


def _restore_radius(value: Any, max_radius: Optional[float] = None) -> float:
    if value is None:
        return 0.0
    try:
        radius = float(value)
    except (TypeError, ValueError, OverflowError):
        logging.warning(f"Invalid clock radius in snapshot: {value!r}")
        return 0.0
    if not math.isfinite(radius) or radius < 0:
        logging.warning(f"Invalid clock radius in snapshot: {value!r}")
        return 0.0
    limit = MAX_CLOCK_RADIUS if max_radius is None else min(max_radius, MAX_CLOCK_RADIUS)
    if radius > limit:
        logging.warning(f"Clock radius {radius} in snapshot exceeds {limit}, ignoring")
        return 0.0
    return radius
