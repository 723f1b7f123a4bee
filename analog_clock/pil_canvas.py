"""
PilCanvas - Pillow rasterizer for clock primitives

Paints a primitive list onto an RGB image, alpha blending each
color over what is already painted, and answers font-metric
queries for the numeral font.
"""

import logging
from typing import Dict, Iterable, Tuple

from PIL import Image, ImageDraw, ImageFont

from .geometry import FontMetrics, Point
from .primitives import CapStyle, Dot, FilledCircle, Line, Primitive, StrokedCircle, Text
from .style import argb_to_rgba


class PilCanvas:
    """Rasterizes clock frames with PIL ImageDraw"""

    def __init__(self, font_path: str = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
                 fallback_to_default_font: bool = True,
                 background_color: Tuple[int, int, int] = (20, 20, 30)):
        self.font_path = font_path
        self.fallback_to_default_font = fallback_to_default_font
        self.background_color = background_color
        self._font_cache: Dict[int, ImageFont.ImageFont] = {}

    def _load_font(self, size: int) -> ImageFont.ImageFont:
        """Load font with caching"""
        if size not in self._font_cache:
            try:
                self._font_cache[size] = ImageFont.truetype(self.font_path, size)
            except OSError as e:
                if not self.fallback_to_default_font:
                    raise
                logging.warning(f"Could not load numeral font {self.font_path}: {e}, using default")
                self._font_cache[size] = ImageFont.load_default(size)
        return self._font_cache[size]

    def font_metrics(self, font_size: float) -> FontMetrics:
        """Signed metrics of the numeral font (ascent negative)"""
        size = int(round(font_size))
        if size < 1:
            return FontMetrics.ZERO
        ascent, descent = self._load_font(size).getmetrics()
        return FontMetrics(-float(ascent), float(descent))

    def render(self, primitives: Iterable[Primitive], width: int, height: int) -> Image.Image:
        """Paint primitives in order onto a fresh image"""
        # RGBA drawing onto an RGB image blends translucent fills
        img = Image.new('RGB', (max(1, width), max(1, height)), self.background_color)
        draw = ImageDraw.Draw(img, 'RGBA')
        for primitive in primitives:
            self.draw(draw, primitive)
        return img

    def draw(self, draw: ImageDraw.ImageDraw, primitive: Primitive) -> None:
        """Paint a single primitive; zero-extent shapes paint nothing"""
        if primitive.is_degenerate:
            return

        if isinstance(primitive, (FilledCircle, Dot)):
            draw.ellipse(self._bbox(primitive.center, primitive.radius),
                         fill=argb_to_rgba(primitive.color))
        elif isinstance(primitive, StrokedCircle):
            # PIL strokes inward from the bbox; widen it so the stroke is centered
            width = max(1, int(round(primitive.stroke_width)))
            draw.ellipse(self._bbox(primitive.center, primitive.radius + width / 2),
                         outline=argb_to_rgba(primitive.color), width=width)
        elif isinstance(primitive, Text):
            font = self._load_font(max(1, int(round(primitive.font_size))))
            draw.text((primitive.baseline.x, primitive.baseline.y), primitive.content,
                      fill=argb_to_rgba(primitive.color), font=font, anchor='ms')
        elif isinstance(primitive, Line):
            self._draw_line(draw, primitive)
        else:
            raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    def _draw_line(self, draw: ImageDraw.ImageDraw, line: Line) -> None:
        color = argb_to_rgba(line.color)
        width = max(1, int(round(line.stroke_width)))
        draw.line([(line.start.x, line.start.y), (line.end.x, line.end.y)], fill=color, width=width)
        if line.cap is CapStyle.ROUND and width > 1:
            for end in (line.start, line.end):
                draw.ellipse(self._bbox(end, width / 2), fill=color)

    @staticmethod
    def _bbox(center: Point, radius: float) -> Tuple[float, float, float, float]:
        return (center.x - radius, center.y - radius, center.x + radius, center.y + radius)
