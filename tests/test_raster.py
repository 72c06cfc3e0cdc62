import struct

import pytest
from PIL import Image

from png2ico.core import Raster
from png2ico.core.raster import truncate_channel


def test_from_rgba_image():
    image = Image.new('RGBA', (3, 2), (10, 20, 30, 40))
    raster = Raster.from_image(image)
    assert raster.size == (3, 2)
    assert raster.pixel(2, 1) == (10, 20, 30, 40)


def test_from_rgb_image_is_opaque():
    raster = Raster.from_image(Image.new('RGB', (2, 2), (1, 2, 3)))
    assert raster.pixel(0, 0) == (1, 2, 3, 255)


def test_from_16bit_gray_image_keeps_high_byte():
    image = Image.frombytes('I;16', (2, 1), struct.pack('<HH', 0x1234, 0xABCD))
    raster = Raster.from_image(image)
    assert raster.pixel(0, 0) == (0x12, 0x12, 0x12, 255)
    assert raster.pixel(1, 0) == (0xAB, 0xAB, 0xAB, 255)


def test_from_channels_16bit_shift():
    raster = Raster.from_channels(1, 1, [(0xFFFF, 0x1234, 0x00FF, 0x8000)], bits=16)
    assert raster.pixel(0, 0) == (0xFF, 0x12, 0x00, 0x80)


def test_truncate_channel():
    assert truncate_channel(0xFFFF) == 0xFF
    assert truncate_channel(0x01FF) == 0x01
    assert truncate_channel(200, bits=8) == 200


def test_to_image_round_trip(gradient_raster):
    assert Raster.from_image(gradient_raster.to_image()) == gradient_raster


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 1)])
def test_rejects_empty_dimensions(width, height):
    with pytest.raises(ValueError):
        Raster(width, height, b'')


def test_rejects_buffer_mismatch():
    with pytest.raises(ValueError):
        Raster(2, 2, bytes(12))


def test_pixel_out_of_range(gradient_raster):
    with pytest.raises(IndexError):
        gradient_raster.pixel(gradient_raster.width, 0)


@pytest.mark.parametrize("value,expected", [(0x8000, 0x80), (0x12FF, 0x12), (-5, 0), (0x12345, 0xFF)])
def test_from_32bit_gray_image_clamps_and_shifts(value, expected):
    raster = Raster.from_image(Image.new('I', (1, 1), value))
    assert raster.pixel(0, 0) == (expected, expected, expected, 255)
