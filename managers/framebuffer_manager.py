"""
Framebuffer Manager

Pushes rendered clock frames straight to the Linux framebuffer.
"""
import logging
import mmap
from typing import Optional, Tuple

import numpy as np
from PIL import Image


def rgb_to_rgb565(rgb: np.ndarray) -> np.ndarray:
    """Convert an (h, w, 3) uint8 RGB array to packed RGB565"""
    r = (rgb[:, :, 0] >> 3).astype(np.uint16)
    g = (rgb[:, :, 1] >> 2).astype(np.uint16)
    b = (rgb[:, :, 2] >> 3).astype(np.uint16)
    return (r << 11) | (g << 5) | b


def rgb_to_xrgb8888(rgb: np.ndarray) -> np.ndarray:
    """Convert an (h, w, 3) uint8 RGB array to packed 32-bit XRGB"""
    r = rgb[:, :, 0].astype(np.uint32)
    g = rgb[:, :, 1].astype(np.uint32)
    b = rgb[:, :, 2].astype(np.uint32)
    return (0xFF << 24) | (r << 16) | (g << 8) | b


class FramebufferManager:
    """Direct framebuffer output for clock frames"""

    def __init__(self, fb_device: str = "/dev/fb0", sysfs_dir: str = "/sys/class/graphics/fb0"):
        self.fb_device = fb_device
        self.sysfs_dir = sysfs_dir

        # Framebuffer parameters (updated by _get_fb_info)
        self.fb_width = 640
        self.fb_height = 480
        self.fb_bpp = 16  # bits per pixel
        self.fb_size = self.fb_width * self.fb_height * (self.fb_bpp // 8)

        # Memory management
        self.fb_file = None
        self.fb_mmap = None
        self.fb_array: Optional[np.ndarray] = None
        self.is_available = False

    @property
    def size(self) -> Tuple[int, int]:
        return self.fb_width, self.fb_height

    def initialize(self) -> bool:
        """Open and memory-map the framebuffer; False if it is not usable"""
        try:
            self._get_fb_info()

            self.fb_file = open(self.fb_device, 'r+b')
            self.fb_mmap = mmap.mmap(self.fb_file.fileno(), self.fb_size)

            dtype = np.uint16 if self.fb_bpp == 16 else np.uint32
            self.fb_array = np.frombuffer(self.fb_mmap, dtype=dtype).reshape((self.fb_height, self.fb_width))

            self.is_available = True
            logging.info(f"Framebuffer initialized: {self.fb_width}x{self.fb_height}, {self.fb_bpp}bpp")

        except (OSError, ValueError) as e:
            logging.warning(f"Framebuffer not available: {e}")
            self.cleanup()
            self.is_available = False

        return self.is_available

    def _get_fb_info(self) -> None:
        """Read framebuffer geometry from sysfs"""
        try:
            with open(f"{self.sysfs_dir}/virtual_size", 'r') as f:
                self.fb_width, self.fb_height = map(int, f.read().strip().split(','))

            with open(f"{self.sysfs_dir}/bits_per_pixel", 'r') as f:
                self.fb_bpp = int(f.read().strip())

        except (OSError, ValueError) as e:
            logging.warning(f"Could not read framebuffer info, using defaults: {e}")

        self.fb_size = self.fb_width * self.fb_height * (self.fb_bpp // 8)

    def encode(self, img: Image.Image) -> np.ndarray:
        """Convert a frame to the framebuffer pixel format, padding or cropping to fit"""
        if img.mode != 'RGB':
            img = img.convert('RGB')
        if img.size != (self.fb_width, self.fb_height):
            canvas = Image.new('RGB', (self.fb_width, self.fb_height), (0, 0, 0))
            canvas.paste(img, ((self.fb_width - img.width) // 2, (self.fb_height - img.height) // 2))
            img = canvas

        rgb = np.asarray(img, dtype=np.uint8)
        if self.fb_bpp == 16:
            return rgb_to_rgb565(rgb)
        return rgb_to_xrgb8888(rgb)

    def display_frame(self, img: Image.Image) -> bool:
        """Write one frame to the framebuffer"""
        if not self.is_available:
            return False

        try:
            np.copyto(self.fb_array, self.encode(img))
            self.fb_mmap.flush()
            return True

        except (OSError, ValueError) as e:
            logging.error(f"Failed to display frame on framebuffer: {e}")
            return False

    def clear_screen(self, color: Tuple[int, int, int] = (0, 0, 0)) -> bool:
        """Clear framebuffer to solid color"""
        if not self.is_available:
            return False
        return self.display_frame(Image.new('RGB', (self.fb_width, self.fb_height), color))

    def cleanup(self) -> None:
        """Release framebuffer resources"""
        # The array view must go before the mmap can close
        self.fb_array = None

        if self.fb_mmap is not None:
            try:
                self.fb_mmap.flush()
            except (OSError, ValueError) as e:
                logging.warning(f"Failed to flush framebuffer: {e}")
            self.fb_mmap.close()
            self.fb_mmap = None

        if self.fb_file is not None:
            self.fb_file.close()
            self.fb_file = None

        self.is_available = False
        logging.debug("Framebuffer resources cleaned up")
