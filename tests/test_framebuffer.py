import numpy as np
from PIL import Image

from managers.framebuffer_manager import FramebufferManager, rgb_to_rgb565, rgb_to_xrgb8888


def test_rgb565_packing():
    rgb = np.array([[[255, 255, 255], [255, 0, 0], [0, 255, 0], [0, 0, 255]]], dtype=np.uint8)
    assert rgb_to_rgb565(rgb).tolist() == [[0xFFFF, 0xF800, 0x07E0, 0x001F]]


def test_xrgb8888_packing():
    rgb = np.array([[[0x12, 0x34, 0x56]]], dtype=np.uint8)
    assert rgb_to_xrgb8888(rgb).tolist() == [[0xFF123456]]


def test_encode_centers_smaller_frame():
    fb = FramebufferManager()
    fb.fb_width, fb.fb_height, fb.fb_bpp = 6, 4, 16
    data = fb.encode(Image.new("RGBA", (2, 2), (255, 255, 255, 255)))
    assert data.shape == (4, 6)
    assert data.dtype == np.uint16
    assert int(data[1, 2]) == 0xFFFF
    assert int(data[0, 0]) == 0


def test_missing_device_degrades_to_noop(tmp_path):
    fb = FramebufferManager(fb_device=str(tmp_path / "fb0"), sysfs_dir=str(tmp_path))
    assert fb.initialize() is False
    assert fb.is_available is False
    assert fb.display_frame(Image.new("RGB", (4, 4))) is False
    assert fb.clear_screen() is False
    fb.cleanup()


def test_file_backed_framebuffer(tmp_path):
    (tmp_path / "virtual_size").write_text("4,2\n")
    (tmp_path / "bits_per_pixel").write_text("32\n")
    device = tmp_path / "fb0"
    device.write_bytes(b"\x00" * (4 * 2 * 4))

    fb = FramebufferManager(fb_device=str(device), sysfs_dir=str(tmp_path))
    assert fb.initialize() is True
    assert fb.size == (4, 2)
    assert fb.clear_screen((0x12, 0x34, 0x56)) is True
    fb.cleanup()

    pixels = np.frombuffer(device.read_bytes(), dtype=np.uint32)
    assert set(pixels.tolist()) == {0xFF123456}
