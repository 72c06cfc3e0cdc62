"""Проверка путей входного и выходного файлов."""
from pathlib import Path
from typing import Union

ICO_SUFFIX = '.ico'
PNG_SUFFIX = '.png'


def is_png_path(path: Union[str, Path]) -> bool:
    """Входной файл должен иметь расширение .png."""
    return Path(path).suffix.lower() == PNG_SUFFIX


def ensure_ico_suffix(path: Union[str, Path]) -> Path:
    """Добавление .ico, если у выходного файла другое расширение."""
    path = Path(path)
    if path.suffix.lower() == ICO_SUFFIX:
        return path
    return path.with_name(path.name + ICO_SUFFIX)
