"""
Unified Routes Module

API route definitions for the clock surface.
Provides setup functions for each route group that can be imported by main.py.
"""
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter
from fastapi.responses import Response

from analog_clock.config import ClockPresets
from analog_clock.style import parse_color
from models.request_models import (
    ClockPresetRequest,
    ClockResizeRequest,
    ClockStateRequest,
    ClockStyleRequest,
)
from utils.route_helpers import manager_operation

if TYPE_CHECKING:
    from managers.clock_manager import ClockDisplayManager


# =============================================================================
# CLOCK ROUTES
# =============================================================================

def setup_clock_routes(clock_manager: 'ClockDisplayManager') -> APIRouter:
    """
    Setup clock routes with dependency injection

    Args:
        clock_manager: ClockDisplayManager hosting the clock surface

    Returns:
        Configured APIRouter
    """
    router = APIRouter()

    @router.get("/clock/frame.png")
    async def get_clock_frame():
        """Latest rendered frame"""
        png = manager_operation(clock_manager.frame_png, "render clock frame")
        return Response(content=png, media_type="image/png")

    @router.get("/clock/status")
    async def get_clock_status():
        """Clock surface and redraw loop status"""
        return clock_manager.get_status()

    @router.get("/clock/style")
    async def get_clock_style():
        """Current colors as ARGB integers"""
        return clock_manager.view.style.to_options()

    @router.put("/clock/style")
    async def set_clock_style(request: ClockStyleRequest):
        """Change one or more colors; unset options keep their value"""
        options = request.model_dump(exclude_none=True)

        def apply():
            parsed = {name: parse_color(value) for name, value in options.items()}
            return clock_manager.set_style(**parsed)

        style = manager_operation(apply, "set clock style")
        logging.info(f"Clock style updated: {sorted(options)}")
        return style

    @router.post("/clock/resize")
    async def resize_clock(request: ClockResizeRequest):
        """Change the surface size"""
        clock_manager.resize(request.width, request.height)
        return {
            "width": clock_manager.width,
            "height": clock_manager.height,
            "radius": clock_manager.view.geometry.radius,
        }

    @router.get("/clock/presets")
    async def list_clock_presets():
        return {"presets": ClockPresets.names(), "current": clock_manager.preset}

    @router.post("/clock/preset")
    async def set_clock_preset(request: ClockPresetRequest):
        """Switch to a predefined clock screen"""
        manager_operation(lambda: clock_manager.apply_preset(request.preset), "apply clock preset")
        return {"status": "success", "preset": request.preset}

    @router.get("/clock/state")
    async def get_clock_state():
        """Snapshot for recreating the clock"""
        return clock_manager.save_state()

    @router.post("/clock/state")
    async def restore_clock_state(request: ClockStateRequest):
        """Restore a snapshot; corrupt entries fall back to defaults"""
        clock_manager.restore_state(request.state)
        return clock_manager.save_state()

    return router
