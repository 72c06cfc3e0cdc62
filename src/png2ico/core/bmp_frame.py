"""Упаковка растра в 32-битный BMP-кадр для ICO.

Кадр состоит из BITMAPINFOHEADER (40 байт) и пикселей BGRA без сжатия.
BITMAPFILEHEADER в ICO не используется. Высота в заголовке удваивается,
строки пишутся сверху вниз, AND-маска не добавляется: прозрачность
задаёт альфа-канал.
"""
import struct

from .raster import Raster

BMP_HEADER_SIZE = 40
BITS_PER_PIXEL = 32
BI_RGB = 0

# size, width, height, planes, bpp, compression, image size,
# x ppm, y ppm, colors used, important colors
_HEADER_FORMAT = '<IiiHHIIiiII'


def pixel_data_size(width: int, height: int) -> int:
    """Размер пиксельных данных в байтах."""
    return width * height * 4


def frame_size(width: int, height: int) -> int:
    """Полный размер кадра без его построения."""
    return BMP_HEADER_SIZE + pixel_data_size(width, height)


def pack_header(width: int, height: int) -> bytes:
    """Заголовок BITMAPINFOHEADER для кадра иконки."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Некорректный размер кадра: {width}x{height}")
    return struct.pack(
        _HEADER_FORMAT,
        BMP_HEADER_SIZE,
        width,
        height * 2,
        1,
        BITS_PER_PIXEL,
        BI_RGB,
        pixel_data_size(width, height),
        0, 0,
        0, 0
    )


def rgba_to_bgra(pixels: bytes) -> bytes:
    """Перестановка каналов RGBA -> BGRA."""
    out = bytearray(len(pixels))
    out[0::4] = pixels[2::4]
    out[1::4] = pixels[1::4]
    out[2::4] = pixels[0::4]
    out[3::4] = pixels[3::4]
    return bytes(out)


def pack_bmp_frame(raster: Raster) -> bytes:
    """Кадр BMP: заголовок + пиксели BGRA, строка 0 первой."""
    return pack_header(raster.width, raster.height) + rgba_to_bgra(raster.pixels)
