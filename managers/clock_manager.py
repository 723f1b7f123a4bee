"""
Clock Display Manager

Hosts the analog clock on the asyncio event loop: provides the deferred
callback primitive for the redraw loop, sizes the surface, rasterizes
frames with Pillow and pushes them to the framebuffer when one is present.
"""

import asyncio
import io
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from PIL import Image

from analog_clock import ClockConfig, ClockPresets, ClockView, PilCanvas
from analog_clock.surface import MeasureMode, MeasureSpec
from analog_clock.time_sample import TimeSample, local_time_sample


class ClockDisplayManager:
    """Owns one live clock surface"""

    def __init__(self, base_config: Optional[ClockConfig] = None, framebuffer_manager=None,
                 preset: str = "default", clock: Callable[[], TimeSample] = local_time_sample):
        """
        Args:
            base_config: Theme configuration presets are layered over
            framebuffer_manager: Optional FramebufferManager for direct output
            preset: Initial preset name

        Raises:
            KeyError: If the preset is unknown
        """
        self.base_config = base_config or ClockConfig()
        self.framebuffer = framebuffer_manager
        self.preset = preset
        self.config = ClockPresets.get(preset, self.base_config)

        self.canvas = PilCanvas(
            font_path=self.config.numeral_font_path,
            fallback_to_default_font=self.config.fallback_to_default_font,
            background_color=self.config.canvas_background_color,
        )
        self.view = ClockView(
            self.schedule_callback,
            self.invalidate,
            style=self.config.default_style(),
            clock=clock,
            font_metrics=self.canvas.font_metrics,
            refresh_period_ms=self.config.refresh_period_ms,
            default_size_px=self.config.default_size_px,
        )

        # Current state
        self.is_running = False
        self.width = 0
        self.height = 0
        self.latest_frame: Optional[Image.Image] = None
        self.frame_count = 0
        self.last_error: Optional[str] = None

        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._pending: Optional[asyncio.TimerHandle] = None

    # --- Host primitives for the view ------------------------------------------

    def schedule_callback(self, delay_ms: int, fn: Callable[[], None]) -> Optional[asyncio.TimerHandle]:
        """Deferred invocation on the event loop thread"""
        if not self.is_running or self._loop is None:
            return None
        self._pending = self._loop.call_later(delay_ms / 1000, fn)
        return self._pending

    def invalidate(self) -> None:
        """Redraw request from the clock"""
        if not self.is_running:
            return
        try:
            self.draw_frame()
        except Exception as e:
            # A failed frame ends the loop; the surface must be restartable
            logging.exception(f"Clock frame failed, redraw loop stopped: {e}")
            self.last_error = str(e)
            self._teardown()

    # --- Lifecycle -------------------------------------------------------------

    async def start(self) -> bool:
        """Size the surface and draw the first frame; the loop sustains itself"""
        if self.is_running:
            return True

        self._loop = asyncio.get_running_loop()
        self.is_running = True
        self.last_error = None
        self.resize(*self.measure())
        logging.info(f"Starting clock ({self.preset}, {self.width}x{self.height}, "
                     f"refresh {self.config.refresh_period_ms} ms)")
        self.draw_frame()
        return True

    async def stop(self) -> None:
        """Tear down the surface, dropping the pending redraw"""
        if not self.is_running:
            return
        self._teardown()
        if self.framebuffer is not None and self.framebuffer.is_available:
            self.framebuffer.clear_screen()
        logging.info(f"Clock stopped after {self.frame_count} frames")

    def _teardown(self) -> None:
        self.is_running = False
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.view.scheduler.reset()

    # --- Surface ---------------------------------------------------------------

    def measure(self) -> Tuple[int, int]:
        """Resolve the surface size from preset, framebuffer and preferred size"""
        fb_size = None
        if self.framebuffer is not None and self.framebuffer.is_available:
            fb_size = self.framebuffer.size

        specs = []
        for index, fixed in enumerate((self.config.width, self.config.height)):
            if fixed is not None:
                specs.append(MeasureSpec(MeasureMode.EXACTLY, fixed))
            elif fb_size is not None:
                specs.append(MeasureSpec(MeasureMode.AT_MOST, fb_size[index]))
            else:
                specs.append(None)
        return self.view.measure(*specs)

    def resize(self, width: int, height: int) -> None:
        """Host size change"""
        if (width, height) == (self.width, self.height):
            return
        self.width = width
        self.height = height
        self.view.on_size_changed(width, height)

    def draw_frame(self) -> Image.Image:
        """Paint one frame and arm the next"""
        primitives = self.view.on_frame_requested()
        img = self.canvas.render(primitives, self.width, self.height)
        self.latest_frame = img
        self.frame_count += 1

        if self.framebuffer is not None and self.framebuffer.is_available:
            self.framebuffer.display_frame(img)
        return img

    def frame_png(self) -> bytes:
        """Latest frame as PNG; composes one on demand if the loop is not running"""
        img = self.latest_frame
        if img is None:
            width, height = (self.width, self.height) if self.width else self.measure()
            if (width, height) != (self.width, self.height):
                self.resize(width, height)
            img = self.canvas.render(self.view.compose_frame(), width, height)

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()

    # --- Configuration -----------------------------------------------------------

    def set_style(self, **options: Any) -> Dict[str, int]:
        """Apply style options; takes effect on the next frame"""
        style = self.view.set_style(**options)
        return style.to_options()

    def apply_preset(self, name: str) -> None:
        """
        Switch to a predefined clock screen.

        Raises:
            KeyError: If the preset is unknown
        """
        config = ClockPresets.get(name, self.base_config)
        self.config = config
        self.preset = name
        self.view.style = config.default_style()
        self.view.default_size_px = config.default_size_px
        self.resize(*self.measure())
        logging.info(f"Clock preset set to {name} ({self.width}x{self.height})")

    def save_state(self) -> Dict[str, Any]:
        return self.view.save_state({
            "preset": self.preset,
            "width": self.width,
            "height": self.height,
        })

    def restore_state(self, snapshot: Any) -> Any:
        """Restore colors and preset; a sized surface keeps its own geometry"""
        view_state = self.view.restore_state(snapshot)
        if self.width and self.height:
            self.view.on_size_changed(self.width, self.height)
        if isinstance(view_state, dict) and view_state.get("preset") in ClockPresets.names():
            self.preset = view_state["preset"]
        return view_state

    def get_status(self) -> Dict[str, Any]:
        sample = self.view.last_sample
        return {
            "running": self.is_running,
            "preset": self.preset,
            "width": self.width,
            "height": self.height,
            "radius": self.view.geometry.radius,
            "refresh_period_ms": self.view.scheduler.period_ms,
            "scheduler_state": self.view.scheduler.state.value,
            "frames": self.frame_count,
            "rearm_count": self.view.scheduler.rearm_count,
            "last_time": str(sample) if sample else None,
            "framebuffer": bool(self.framebuffer is not None and self.framebuffer.is_available),
            "last_error": self.last_error,
        }
