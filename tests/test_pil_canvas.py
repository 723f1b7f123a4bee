from analog_clock.geometry import ClockGeometry, Point
from analog_clock.pil_canvas import PilCanvas
from analog_clock.primitives import CapStyle, Line, StrokedCircle, Text
from analog_clock.renderer import FrameRenderer
from analog_clock.style import ClockStyle
from analog_clock.time_sample import TimeSample

BACKGROUND = (20, 20, 30)


def _frame(canvas, width, height, sample=TimeSample(0, 0, 0)):
    style = ClockStyle(clock_face_background_color=0xFFFFFFFF)
    primitives = FrameRenderer(canvas.font_metrics).render(
        ClockGeometry.from_size(width, height), style, sample)
    return canvas.render(primitives, width, height)


def test_render_paints_face_over_background():
    canvas = PilCanvas(background_color=BACKGROUND)
    img = _frame(canvas, 200, 300)
    assert img.size == (200, 300)
    assert img.mode == "RGB"
    assert img.getpixel((0, 0)) == BACKGROUND
    # Below the center: face only, all hands point up at 00:00:00
    assert img.getpixel((100, 190)) == (255, 255, 255)


def test_translucent_face_blends_with_background():
    canvas = PilCanvas(background_color=(0, 0, 0))
    primitives = FrameRenderer().render(
        ClockGeometry.from_size(100, 100),
        ClockStyle(clock_face_background_color=0x80FF0000),
        TimeSample(0, 0, 0),
    )
    r, g, b = canvas.render(primitives, 100, 100).getpixel((50, 70))
    assert 100 < r < 160
    assert g == b == 0


def test_colorful_face_keeps_canvas_background_visible():
    canvas = PilCanvas(background_color=BACKGROUND)
    primitives = FrameRenderer().render(
        ClockGeometry.from_size(100, 100),
        ClockStyle(clock_face_background_color=0x33FF0000),
        TimeSample(0, 0, 0),
    )
    r, g, b = canvas.render(primitives, 100, 100).getpixel((50, 70))
    # 20% red over (20, 20, 30)
    assert 60 < r < 75
    assert 12 < g < 20
    assert 20 < b < 28


def test_zero_size_frame_does_not_fail():
    canvas = PilCanvas()
    img = _frame(canvas, 0, 0)
    assert img.size == (1, 1)


def test_font_metrics_use_signed_convention():
    canvas = PilCanvas(font_path="/nonexistent/font.ttf", fallback_to_default_font=True)
    metrics = canvas.font_metrics(25.0)
    assert metrics.ascent < 0
    assert metrics.descent >= 0
    assert canvas.font_metrics(0.2).ascent == 0


def test_fonts_are_cached_per_size():
    canvas = PilCanvas(font_path="/nonexistent/font.ttf")
    canvas.font_metrics(20)
    canvas.font_metrics(20.2)
    canvas.font_metrics(30)
    assert sorted(canvas._font_cache) == [20, 30]


def test_degenerate_primitives_paint_nothing():
    canvas = PilCanvas(background_color=(0, 0, 0))
    center = Point(5.0, 5.0)
    img = canvas.render([
        Line(center, center, 3.0, 0xFFFFFFFF, CapStyle.ROUND),
        StrokedCircle(center, 0.0, 1.0, 0xFFFFFFFF),
        Text("", center, 0xFFFFFFFF, 12.0),
    ], 10, 10)
    assert img.getbbox() is None


def test_round_cap_extends_past_endpoints():
    canvas = PilCanvas(background_color=(0, 0, 0))
    line = Line(Point(10.0, 20.0), Point(30.0, 20.0), 8.0, 0xFFFFFFFF, CapStyle.ROUND)
    butt = Line(Point(10.0, 20.0), Point(30.0, 20.0), 8.0, 0xFFFFFFFF, CapStyle.BUTT)
    assert canvas.render([line], 40, 40).getpixel((7, 20))[:3] == (255, 255, 255)
    assert canvas.render([butt], 40, 40).getpixel((7, 20))[:3] == (0, 0, 0)
