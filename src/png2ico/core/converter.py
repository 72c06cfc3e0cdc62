"""Модуль конвертации PNG в ICO."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError, IcoWriteError, InvalidSizeError
from .ico_encoder import IcoEncoder, IconSet, check_icon_count
from .raster import Raster
from .resampler import DEFAULT_FILTER, Resampler, get_resampler
from .worker import FramePackingWorker

logger = logging.getLogger(__name__)

DEFAULT_SIZES = [16, 32, 64, 128, 256]

PathLike = Union[str, Path]


@dataclass
class ConversionResult:
    """Результат конвертации."""
    output_path: Path
    sizes: List[int] = field(default_factory=list)
    bytes_written: int = 0
    source_size: tuple = (0, 0)


def parse_sizes(value: str) -> List[int]:
    """Разбор списка размеров через запятую: '16, 32,64' -> [16, 32, 64]."""
    sizes = []
    for part in value.split(","):
        text = part.strip()
        try:
            sizes.append(int(text))
        except ValueError:
            raise InvalidSizeError(
                f"Некорректный размер '{text}'. Размеры должны быть целыми числами."
            ) from None
    return validate_sizes(sizes)


def validate_sizes(sizes: Iterable[int]) -> List[int]:
    """Проверка размеров: положительные, от 1 до 255 штук."""
    result = list(sizes)
    for size in result:
        if size <= 0:
            raise InvalidSizeError(f"Размер должен быть положительным: {size}")
    check_icon_count(len(result))
    return result


class IconConverter:
    """Класс для конвертации PNG в многоразмерную иконку."""

    def __init__(self, settings: Optional[Dict] = None, resampler: Optional[Resampler] = None):
        """Инициализация конвертера."""
        self.settings = settings or {}
        self.resampler = resampler or get_resampler(
            self.settings.get("resample_filter", DEFAULT_FILTER)
        )
        self.worker = FramePackingWorker(self.settings.get("thread_count", 1))
        self.encoder = IcoEncoder(frame_packer=self.worker)

    def load_source(self, image_path: PathLike) -> Raster:
        """Загрузка и декодирование исходного изображения."""
        path = Path(image_path)
        if not path.is_file():
            raise ImageDecodeError(f"Файл не найден: {path}")
        try:
            with Image.open(path) as image:
                image.load()
                raster = Raster.from_image(image)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageDecodeError(f"Ошибка чтения изображения {path}: {e}") from e

        logger.info("Загружено изображение %s: %sx%s", path, raster.width, raster.height)
        return raster

    def build_icon_set(self, raster: Raster, sizes: Iterable[int]) -> IconSet:
        """Масштабирование исходника под каждый размер в заданном порядке."""
        icon_set = IconSet()
        for size in validate_sizes(sizes):
            icon_set.add(self.resampler.resize(raster, size, size), size)
            logger.debug("Создан кадр %sx%s", size, size)
        return icon_set

    def write_icon(self, icon_set: IconSet, output_path: PathLike) -> int:
        """Запись ICO в файл. Файл закрывается при любом исходе."""
        check_icon_count(len(icon_set))
        path = Path(output_path)
        try:
            with open(path, 'wb') as f:
                written = self.encoder.write(icon_set.rasters, f)
        except OSError as e:
            raise IcoWriteError(f"Ошибка записи {path}: {e}") from e

        logger.debug("Статистика упаковки: %s", self.worker.get_statistics())
        return written

    def convert(
        self,
        input_path: PathLike,
        output_path: PathLike,
        sizes: Optional[Iterable[int]] = None
    ) -> ConversionResult:
        """Полная конвертация: чтение, масштабирование, запись."""
        sizes = validate_sizes(sizes if sizes is not None else DEFAULT_SIZES)
        raster = self.load_source(input_path)
        icon_set = self.build_icon_set(raster, sizes)
        written = self.write_icon(icon_set, output_path)

        logger.info("Записан %s: %s байт, размеры %s", output_path, written, sizes)
        return ConversionResult(Path(output_path), icon_set.sizes, written, raster.size)
