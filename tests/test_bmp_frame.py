import pytest

from png2ico.core import Raster, frame_size, pack_bmp_frame
from png2ico.core.bmp_frame import pack_header, rgba_to_bgra

from helpers import read_bmp_header, solid_raster


def test_header_fields_for_icon_frame():
    header = read_bmp_header(pack_bmp_frame(solid_raster(16, 16)))
    assert header == {
        "size": 40, "width": 16, "height": 32, "planes": 1, "bpp": 32,
        "compression": 0, "image_size": 16 * 16 * 4, "x_ppm": 0, "y_ppm": 0,
        "colors_used": 0, "colors_important": 0,
    }


@pytest.mark.parametrize("width,height", [(1, 1), (16, 16), (48, 48), (256, 256), (7, 3)])
def test_height_is_doubled_and_size_matches(width, height):
    frame = pack_bmp_frame(solid_raster(width, height))
    header = read_bmp_header(frame)
    assert header["width"] == width
    assert header["height"] == 2 * height
    assert len(frame) == frame_size(width, height) == 40 + width * height * 4


def test_pixels_are_bgra_top_down(gradient_raster):
    frame = pack_bmp_frame(gradient_raster)
    for y in range(gradient_raster.height):
        for x in range(gradient_raster.width):
            r, g, b, a = gradient_raster.pixel(x, y)
            offset = 40 + (y * gradient_raster.width + x) * 4
            assert frame[offset:offset + 4] == bytes([b, g, r, a])


def test_no_and_mask_appended():
    frame = pack_bmp_frame(solid_raster(32, 32))
    assert len(frame) == 40 + 32 * 32 * 4


def test_rgba_to_bgra_swaps_red_and_blue():
    assert rgba_to_bgra(bytes([1, 2, 3, 4, 5, 6, 7, 8])) == bytes([3, 2, 1, 4, 7, 6, 5, 8])


def test_header_rejects_empty_frame():
    with pytest.raises(ValueError):
        pack_header(0, 16)


def test_packing_is_deterministic(gradient_raster):
    assert pack_bmp_frame(gradient_raster) == pack_bmp_frame(
        Raster(gradient_raster.width, gradient_raster.height, gradient_raster.pixels)
    )
