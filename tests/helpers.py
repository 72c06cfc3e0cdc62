"""Вспомогательные функции тестов: сплошные растры и разбор ICO."""
import struct

from png2ico.core import Raster

RED = (255, 0, 0, 255)


def solid_raster(width, height, color=RED):
    return Raster(width, height, bytes(color) * (width * height))


def read_header(data):
    return struct.unpack_from('<HHH', data, 0)


def read_entries(data):
    _, _, count = read_header(data)
    entries = []
    for i in range(count):
        width, height, colors, reserved, planes, bpp, size, offset = struct.unpack_from(
            '<BBBBHHII', data, 6 + 16 * i
        )
        entries.append({
            "width": width, "height": height, "colors": colors, "reserved": reserved,
            "planes": planes, "bpp": bpp, "size": size, "offset": offset,
        })
    return entries


def read_bmp_header(data, offset=0):
    fields = struct.unpack_from('<IiiHHIIiiII', data, offset)
    names = ("size", "width", "height", "planes", "bpp", "compression",
             "image_size", "x_ppm", "y_ppm", "colors_used", "colors_important")
    return dict(zip(names, fields))
