"""
Clock Configuration System

Centralized configuration for the analog clock: theme colors, redraw
cadence, preferred surface size and font settings.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import yaml

from .scheduler import REFRESH_PERIOD_MS
from .style import OPTION_NAMES, ClockStyle, parse_color
from .view import DEFAULT_CLOCK_SIZE_PX

ColorOption = Union[int, str]


@dataclass
class ClockConfig:
    """
    Configuration for a clock surface.

    Color values are ARGB integers or "#RRGGBB"/"#AARRGGBB" strings.
    """

    # Theme colors (used when a style option is not set)
    clock_face_background_color: ColorOption = 0xFFFFFFFF
    border_color: ColorOption = 0xFF212121
    number_color: ColorOption = 0xFF212121
    dot_color: ColorOption = 0xFF616161
    hour_hand_color: ColorOption = 0xFF212121
    minute_hand_color: ColorOption = 0xFF424242
    second_hand_color: ColorOption = 0xFFD32F2F

    # Redraw cadence
    refresh_period_ms: int = REFRESH_PERIOD_MS

    # Surface size
    default_size_px: int = DEFAULT_CLOCK_SIZE_PX  # Preferred size when the host does not constrain it
    width: Optional[int] = None         # Fixed surface width (None = measured)
    height: Optional[int] = None        # Fixed surface height (None = measured)

    # Font settings
    numeral_font_path: str = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
    fallback_to_default_font: bool = True

    # Canvas behind the (round) clock face
    canvas_background_color: Tuple[int, int, int] = (20, 20, 30)

    def default_style(self) -> ClockStyle:
        """Build the style from the configured theme colors"""
        return ClockStyle.from_options(
            {name: getattr(self, field_name) for name, field_name in OPTION_NAMES.items()}
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary for serialization"""
        return {
            field.name: getattr(self, field.name)
            for field in self.__dataclass_fields__.values()
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ClockConfig':
        """Create config from dictionary"""
        # Accept public option names for colors as well
        data = {OPTION_NAMES.get(k, k): v for k, v in data.items()}
        valid_fields = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_fields}
        if 'canvas_background_color' in filtered_data:
            filtered_data['canvas_background_color'] = tuple(filtered_data['canvas_background_color'])
        return cls(**filtered_data)

    def copy(self) -> 'ClockConfig':
        """Create a copy of this configuration"""
        return ClockConfig(**self.to_dict())

    def validate(self) -> list:
        """Validate configuration and return list of issues"""
        issues = []

        for field_name in OPTION_NAMES.values():
            try:
                parse_color(getattr(self, field_name))
            except ValueError as e:
                issues.append(f"{field_name}: {e}")

        if self.refresh_period_ms <= 0:
            issues.append(f"refresh_period_ms must be positive, got {self.refresh_period_ms}")

        if self.default_size_px < 0:
            issues.append(f"default_size_px must not be negative, got {self.default_size_px}")

        for field_name in ('width', 'height'):
            value = getattr(self, field_name)
            if value is not None and value < 0:
                issues.append(f"{field_name} must not be negative, got {value}")

        if not os.path.exists(self.numeral_font_path) and not self.fallback_to_default_font:
            issues.append(f"Numeral font not found: {self.numeral_font_path}")

        color = self.canvas_background_color
        if not (isinstance(color, tuple) and len(color) == 3 and
                all(isinstance(c, int) and 0 <= c <= 255 for c in color)):
            issues.append(f"canvas_background_color must be RGB tuple (0-255), got {color}")

        return issues


class ClockPresets:
    """Predefined clock screens, each layered over a base configuration"""

    @staticmethod
    def default(base: Optional[ClockConfig] = None) -> ClockConfig:
        """Theme colors at the preferred size"""
        return base.copy() if base else ClockConfig()

    @staticmethod
    def big(base: Optional[ClockConfig] = None) -> ClockConfig:
        """Large fixed 1000x1000 surface"""
        config = base.copy() if base else ClockConfig()
        config.width = 1000
        config.height = 1000
        return config

    @staticmethod
    def colorful(base: Optional[ClockConfig] = None) -> ClockConfig:
        """Translucent red clock face"""
        config = base.copy() if base else ClockConfig()
        config.clock_face_background_color = 0x33FF0000
        return config

    @classmethod
    def names(cls) -> list:
        return ["default", "big", "colorful"]

    @classmethod
    def get(cls, name: str, base: Optional[ClockConfig] = None) -> ClockConfig:
        """
        Look up a preset by name.

        Raises:
            KeyError: If no preset has that name
        """
        if name not in cls.names():
            raise KeyError(f"Unknown clock preset: {name}")
        return getattr(cls, name)(base)


def load_clock_config(path: Optional[str], base: Optional[ClockConfig] = None) -> ClockConfig:
    """
    Load clock configuration from a YAML file.

    Keys of the file override `base` (defaults if not given). A missing or
    unreadable file yields the base configuration.
    """
    config = base.copy() if base else ClockConfig()
    if not path:
        return config

    try:
        if not os.path.exists(path):
            logging.warning(f"Clock config not found at {path}, using defaults")
            return config
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            logging.error(f"Clock config {path} must be a mapping, got {type(data).__name__}")
            return config
        merged = config.to_dict()
        merged.update({OPTION_NAMES.get(k, k): v for k, v in data.items()})
        loaded = ClockConfig.from_dict(merged)
        for issue in loaded.validate():
            logging.warning(f"Clock config issue in {path}: {issue}")
        return loaded
    except (OSError, yaml.YAMLError, TypeError) as e:
        logging.error(f"Error loading clock config from {path}: {e}")
        return config
