"""
Clock Style

The seven colors of the clock face. Colors are 32-bit ARGB integers
(0xAARRGGBB). A style is immutable: configuration calls build a new style
and swap it in between frames.
"""

import logging
from dataclasses import dataclass, fields, replace as dataclass_replace
from typing import Any, Dict, Mapping, Optional, Tuple


# Option name -> dataclass field
OPTION_NAMES = {
    "clockFaceBackgroundColor": "clock_face_background_color",
    "borderColor": "border_color",
    "numberColor": "number_color",
    "dotColor": "dot_color",
    "hourHandColor": "hour_hand_color",
    "minuteHandColor": "minute_hand_color",
    "secondHandColor": "second_hand_color",
}


def parse_color(value: Any) -> int:
    """
    Parse a color option into an ARGB integer.

    Accepts ints (signed 32-bit ARGB included, so -1 is opaque white),
    "#RRGGBB" (opaque), "#AARRGGBB" and "0x..." strings.

    Raises:
        ValueError: If the value is not a recognizable color
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a color: {value!r}")
    if isinstance(value, int):
        if not -0x80000000 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Color out of range: {value:#x}")
        return value & 0xFFFFFFFF
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#"):
            digits = text[1:]
            if len(digits) == 6:
                return 0xFF000000 | int(digits, 16)
            if len(digits) == 8:
                return int(digits, 16)
            raise ValueError(f"Color must be #RRGGBB or #AARRGGBB, got {value!r}")
        if text.lower().startswith("0x"):
            return parse_color(int(text, 16))
    raise ValueError(f"Not a color: {value!r}")


def argb_to_rgba(color: int) -> Tuple[int, int, int, int]:
    """Convert an ARGB integer to a Pillow (r, g, b, a) tuple"""
    return (
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
        (color >> 24) & 0xFF,
    )


@dataclass(frozen=True)
class ClockStyle:
    clock_face_background_color: int = 0xFFFFFFFF
    border_color: int = 0xFF212121
    number_color: int = 0xFF212121
    dot_color: int = 0xFF616161
    hour_hand_color: int = 0xFF212121
    minute_hand_color: int = 0xFF424242
    second_hand_color: int = 0xFFD32F2F

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]],
                     defaults: Optional['ClockStyle'] = None) -> 'ClockStyle':
        """
        Merge configuration options over defaults.

        Options are keyed by their public names (e.g. "borderColor").
        Missing, None or unparsable values keep the default color.
        """
        base = defaults or cls()
        if not options:
            return base
        return base.replace(**options)

    def replace(self, **options: Any) -> 'ClockStyle':
        """Return a new style with the given options applied"""
        changes: Dict[str, int] = {}
        for name, value in options.items():
            field_name = OPTION_NAMES.get(name, name)
            if field_name not in _FIELD_NAMES:
                logging.warning(f"Ignoring unknown clock style option: {name}")
                continue
            if value is None:
                continue
            try:
                changes[field_name] = parse_color(value)
            except ValueError as e:
                logging.warning(f"Invalid value for {name}, keeping {getattr(self, field_name):#010x}: {e}")
        return dataclass_replace(self, **changes) if changes else self

    def to_options(self) -> Dict[str, int]:
        """Style as public option names"""
        return {name: getattr(self, field_name) for name, field_name in OPTION_NAMES.items()}


_FIELD_NAMES = {f.name for f in fields(ClockStyle)}
