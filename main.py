"""
HSG Canvas Clock Main Application

This is the entry point for the canvas clock.
It wires together the clock manager, framebuffer output and API routes.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from analog_clock import load_clock_config
from managers.clock_manager import ClockDisplayManager
from managers.framebuffer_manager import FramebufferManager
from routes import setup_clock_routes

# Config
from config import (
    CLOCK_CONFIG_PATH,
    CLOCK_PRESET,
    DEFAULT_PORT,
    FRAMEBUFFER_DEVICE,
    FRAMEBUFFER_ENABLED,
    PRODUCTION_PORT,
)

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def create_app(clock_manager: ClockDisplayManager = None,
               framebuffer_manager: FramebufferManager = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        clock_manager: Pre-built manager (built from config when None)
        framebuffer_manager: Framebuffer output (opened from config when None and enabled)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan management for FastAPI application.
        Handles startup and shutdown tasks.
        """
        # STARTUP
        logging.info("Starting HSG Canvas clock...")

        framebuffer = app.state.framebuffer_manager
        if framebuffer is not None and not framebuffer.is_available:
            logging.info("Initializing framebuffer...")
            framebuffer.initialize()

        await app.state.clock_manager.start()
        logging.info("HSG Canvas clock started successfully!")

        yield  # Application is running

        # SHUTDOWN
        logging.info("Shutting down HSG Canvas clock...")
        await app.state.clock_manager.stop()
        if framebuffer is not None:
            framebuffer.cleanup()
        logging.info("HSG Canvas clock shut down successfully!")

    if framebuffer_manager is None and clock_manager is None and FRAMEBUFFER_ENABLED:
        framebuffer_manager = FramebufferManager(FRAMEBUFFER_DEVICE)

    if clock_manager is None:
        clock_manager = ClockDisplayManager(
            base_config=load_clock_config(CLOCK_CONFIG_PATH),
            framebuffer_manager=framebuffer_manager,
            preset=CLOCK_PRESET,
        )

    app = FastAPI(
        title="HSG Canvas Clock",
        description="Live analog clock rendered on the canvas framebuffer",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.clock_manager = clock_manager
    app.state.framebuffer_manager = framebuffer_manager
    app.include_router(setup_clock_routes(clock_manager))
    return app


if __name__ == "__main__":
    import argparse
    import uvicorn

    # Parse command line arguments
    parser = argparse.ArgumentParser(description='HSG Canvas Clock - live analog clock')
    parser.add_argument('--production', action='store_true',
                        help='Run in production mode (port 80)')
    parser.add_argument('--port', type=int, default=None,
                        help='Custom port (overrides --production)')
    args = parser.parse_args()

    # Determine port
    if args.port:
        port = args.port
    elif args.production:
        port = PRODUCTION_PORT
    else:
        port = DEFAULT_PORT

    uvicorn.run(
        create_app(),
        host="0.0.0.0",
        port=port,
        log_level="info",
    )
