"""
HSG Canvas Clock Configuration

Central configuration file for all constants and settings.
"""
import os

# Clock configuration file (YAML, optional)
CLOCK_CONFIG_PATH = os.getenv(
    "CLOCK_CONFIG_PATH",
    os.path.join(os.path.dirname(__file__), "clock.yaml")
)

# Preset used at startup: "default", "big" or "colorful"
CLOCK_PRESET = os.getenv("CLOCK_PRESET", "default")

# Framebuffer output
FRAMEBUFFER_ENABLED = os.getenv("CLOCK_FRAMEBUFFER", "1") not in ("0", "false", "no")
FRAMEBUFFER_DEVICE = os.getenv("CLOCK_FRAMEBUFFER_DEVICE", "/dev/fb0")

# Server Configuration
DEFAULT_PORT = 8000
PRODUCTION_PORT = 80
