"""Сборка контейнера ICO из набора растров."""
import logging
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, List, Optional, Sequence

from .bmp_frame import BITS_PER_PIXEL, pack_bmp_frame
from .errors import IconCountError
from .raster import Raster

logger = logging.getLogger(__name__)

ICO_HEADER_SIZE = 6
ICO_ENTRY_SIZE = 16
ICO_TYPE_ICON = 1
MAX_ICON_COUNT = 255

_HEADER_FORMAT = '<HHH'
_ENTRY_FORMAT = '<BBBBHHII'


@dataclass(frozen=True)
class IconFrame:
    """Растр и запрошенный для него размер."""
    raster: Raster
    requested_size: int


@dataclass
class IconSet:
    """Упорядоченный набор кадров: порядок вставки = порядок в файле."""
    frames: List[IconFrame] = field(default_factory=list)

    def add(self, raster: Raster, requested_size: int) -> None:
        self.frames.append(IconFrame(raster, requested_size))

    @property
    def rasters(self) -> List[Raster]:
        return [frame.raster for frame in self.frames]

    @property
    def sizes(self) -> List[int]:
        return [frame.requested_size for frame in self.frames]

    def __len__(self) -> int:
        return len(self.frames)


@dataclass(frozen=True)
class DirectoryEntry:
    """Запись каталога ICO (16 байт)."""
    width: int
    height: int
    size: int
    offset: int
    planes: int = 1
    bits_per_pixel: int = BITS_PER_PIXEL

    @staticmethod
    def dimension_byte(value: int) -> int:
        """Размер 256 и больше кодируется нулём."""
        return value if value < 256 else 0

    def pack(self) -> bytes:
        return struct.pack(
            _ENTRY_FORMAT,
            self.dimension_byte(self.width),
            self.dimension_byte(self.height),
            0,  # палитра
            0,  # резерв
            self.planes,
            self.bits_per_pixel,
            self.size,
            self.offset
        )


def check_icon_count(count: int) -> None:
    """Количество кадров должно помещаться в заголовок."""
    if count < 1 or count > MAX_ICON_COUNT:
        raise IconCountError(
            f"Количество размеров должно быть от 1 до {MAX_ICON_COUNT}, получено {count}"
        )


def pack_header(count: int) -> bytes:
    """Заголовок ICO: резерв, тип, количество."""
    check_icon_count(count)
    return struct.pack(_HEADER_FORMAT, 0, ICO_TYPE_ICON, count)


def first_payload_offset(count: int) -> int:
    return ICO_HEADER_SIZE + ICO_ENTRY_SIZE * count


def build_directory(rasters: Sequence[Raster], payload_sizes: Sequence[int]) -> List[DirectoryEntry]:
    """Расчёт записей каталога с накоплением смещений в порядке кадров."""
    if len(rasters) != len(payload_sizes):
        raise ValueError("Количество растров и кадров не совпадает")

    offset = first_payload_offset(len(rasters))
    entries = []
    for raster, size in zip(rasters, payload_sizes):
        entries.append(DirectoryEntry(raster.width, raster.height, size, offset))
        offset += size
    return entries


class IcoEncoder:
    """Кодировщик ICO: сначала все кадры, затем заголовок, каталог и данные."""

    def __init__(self, frame_packer: Optional[Callable[[Sequence[Raster]], List[bytes]]] = None):
        # frame_packer упаковывает список растров, сохраняя порядок
        self.frame_packer = frame_packer or self._pack_sequential

    @staticmethod
    def _pack_sequential(rasters: Sequence[Raster]) -> List[bytes]:
        return [pack_bmp_frame(raster) for raster in rasters]

    def _prepare(self, rasters: Sequence[Raster]):
        check_icon_count(len(rasters))
        payloads = self.frame_packer(rasters)
        directory = build_directory(rasters, [len(p) for p in payloads])
        return payloads, directory

    def write(self, rasters: Sequence[Raster], sink: BinaryIO) -> int:
        """Запись ICO в поток. Возвращает количество записанных байт.

        Ошибки записи не перехватываются: частично записанный поток
        остаётся на совести вызывающего кода.
        """
        payloads, directory = self._prepare(rasters)

        written = 0
        sink.write(pack_header(len(rasters)))
        written += ICO_HEADER_SIZE
        for entry in directory:
            sink.write(entry.pack())
            written += ICO_ENTRY_SIZE

        for entry, payload in zip(directory, payloads):
            logger.debug("Запись кадра %sx%s: %s байт по смещению %s",
                         entry.width, entry.height, entry.size, entry.offset)
            sink.write(payload)
            written += len(payload)

        return written

    def encode(self, rasters: Sequence[Raster]) -> bytes:
        """ICO целиком в памяти."""
        payloads, directory = self._prepare(rasters)
        parts = [pack_header(len(rasters))]
        parts.extend(entry.pack() for entry in directory)
        parts.extend(payloads)
        return b''.join(parts)

    def encode_icon_set(self, icon_set: IconSet) -> bytes:
        return self.encode(icon_set.rasters)
