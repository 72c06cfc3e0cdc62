"""Модуль многопоточной упаковки кадров."""
import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Sequence

from .bmp_frame import pack_bmp_frame
from .raster import Raster

logger = logging.getLogger(__name__)


@dataclass
class FrameResult:
    """Результат упаковки одного кадра."""
    index: int
    width: int
    height: int
    payload: bytes
    processing_time: float


def resolve_thread_count(thread_count: int) -> int:
    """0 или меньше - автоматически (CPU - 1, от 2 до 16)."""
    if thread_count <= 0:
        return max(2, min((os.cpu_count() or 1) - 1, 16))
    return thread_count


class FramePackingWorker:
    """Упаковка кадров в пуле потоков с сохранением порядка."""

    def __init__(self, thread_count: int = 1):
        self._thread_count = resolve_thread_count(thread_count)
        self.results: List[FrameResult] = []
        self._elapsed = 0.0

    @property
    def thread_count(self) -> int:
        return self._thread_count

    def _pack_single(self, index: int, raster: Raster) -> FrameResult:
        start_time = time.time()
        payload = pack_bmp_frame(raster)
        return FrameResult(
            index, raster.width, raster.height, payload, time.time() - start_time
        )

    def run(self, rasters: Sequence[Raster]) -> List[FrameResult]:
        """Упаковка всех кадров. Исключение любого кадра прерывает работу."""
        start_time = time.time()
        if self._thread_count == 1 or len(rasters) < 2:
            self.results = [self._pack_single(i, r) for i, r in enumerate(rasters)]
        else:
            workers = min(self._thread_count, len(rasters))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                # map возвращает результаты в порядке задач
                self.results = list(executor.map(
                    self._pack_single, range(len(rasters)), rasters
                ))
        self._elapsed = time.time() - start_time

        for result in self.results:
            logger.debug("Кадр %s (%sx%s) упакован за %.4f с",
                         result.index, result.width, result.height, result.processing_time)
        return self.results

    def __call__(self, rasters: Sequence[Raster]) -> List[bytes]:
        """Интерфейс упаковщика для IcoEncoder."""
        return [result.payload for result in self.run(rasters)]

    def get_statistics(self) -> dict:
        """Статистика последнего запуска."""
        return {
            "frames": len(self.results),
            "bytes": sum(len(r.payload) for r in self.results),
            "threads": self._thread_count,
            "elapsed": self._elapsed,
        }
