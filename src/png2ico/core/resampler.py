"""Масштабирование растров."""
import logging
from typing import Dict, Protocol

from PIL import Image

from .raster import Raster

logger = logging.getLogger(__name__)

RESAMPLE_FILTERS: Dict[str, Image.Resampling] = {
    "lanczos": Image.Resampling.LANCZOS,
    "bicubic": Image.Resampling.BICUBIC,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "box": Image.Resampling.BOX,
    "nearest": Image.Resampling.NEAREST,
}

DEFAULT_FILTER = "lanczos"


class Resampler(Protocol):
    """Любой объект, возвращающий растр ровно запрошенного размера."""

    def resize(self, raster: Raster, width: int, height: int) -> Raster:
        ...


class PillowResampler:
    """Масштабирование через Pillow с выбранным фильтром."""

    def __init__(self, filter_name: str = DEFAULT_FILTER):
        key = filter_name.lower()
        if key not in RESAMPLE_FILTERS:
            raise ValueError(
                f"Неизвестный фильтр '{filter_name}'. "
                f"Доступны: {', '.join(RESAMPLE_FILTERS)}"
            )
        self.filter_name = key
        self._filter = RESAMPLE_FILTERS[key]

    def resize(self, raster: Raster, width: int, height: int) -> Raster:
        if width <= 0 or height <= 0:
            raise ValueError(f"Некорректный целевой размер: {width}x{height}")
        if raster.size == (width, height):
            return raster

        logger.debug("Масштабирование %sx%s -> %sx%s (%s)",
                     raster.width, raster.height, width, height, self.filter_name)
        # Pillow учитывает альфа-канал при ресемплинге RGBA
        resized = raster.to_image().resize((width, height), self._filter)
        return Raster.from_image(resized)


def get_resampler(filter_name: str = DEFAULT_FILTER) -> PillowResampler:
    """Получение ресемплера по имени фильтра."""
    return PillowResampler(filter_name)
