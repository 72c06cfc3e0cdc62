"""Растровое изображение RGBA 8 бит на канал."""
import struct
from dataclasses import dataclass
from typing import Iterable, Tuple

from PIL import Image

Pixel = Tuple[int, int, int, int]

# Широкие серые режимы Pillow и формат их сырых отсчётов.
# Старые версии Pillow открывают 16-битный серый PNG в режиме I.
_WIDE_GRAY_FORMATS = {
    'I;16': '<H',
    'I;16L': '<H',
    'I;16B': '>H',
    'I;16N': '=H',
    'I': '=i',
}


def truncate_channel(value: int, bits: int = 16) -> int:
    """Усечение канала до 8 бит сдвигом вправо."""
    return (value >> (bits - 8)) & 0xFF


@dataclass(frozen=True)
class Raster:
    """Неизменяемая сетка пикселей, 4 байта R, G, B, A на пиксель."""
    width: int
    height: int
    pixels: bytes

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Некорректный размер растра: {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError(
                f"Размер буфера {len(self.pixels)} не соответствует "
                f"{self.width}x{self.height}"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Pixel:
        """Получение пикселя (r, g, b, a)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Координаты вне растра: ({x}, {y})")
        offset = (y * self.width + x) * 4
        r, g, b, a = self.pixels[offset:offset + 4]
        return r, g, b, a

    @classmethod
    def from_image(cls, image: Image.Image) -> 'Raster':
        """Создание растра из изображения Pillow."""
        sample_format = _WIDE_GRAY_FORMATS.get(image.mode)
        if sample_format is not None:
            # 16-битный серый: берём старший байт, альфа непрозрачная
            count = image.width * image.height
            byte_order, sample_type = sample_format
            samples = struct.unpack(f"{byte_order}{count}{sample_type}", image.tobytes())
            data = bytearray()
            for value in samples:
                gray = truncate_channel(min(max(value, 0), 0xFFFF))
                data.extend((gray, gray, gray, 255))
            return cls(image.width, image.height, bytes(data))

        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        return cls(image.width, image.height, image.tobytes('raw', 'RGBA'))

    @classmethod
    def from_channels(
        cls,
        width: int,
        height: int,
        values: Iterable[Pixel],
        bits: int = 8
    ) -> 'Raster':
        """Создание растра из кортежей (r, g, b, a) с разрядностью bits."""
        if bits < 8:
            raise ValueError(f"Разрядность канала меньше 8 бит: {bits}")
        data = bytearray()
        for pixel in values:
            data.extend(truncate_channel(channel, bits) for channel in pixel)
        return cls(width, height, bytes(data))

    def to_image(self) -> Image.Image:
        """Преобразование в изображение Pillow (RGBA)."""
        return Image.frombytes('RGBA', self.size, self.pixels)
