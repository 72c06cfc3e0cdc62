"""Исключения конвертера PNG -> ICO."""


class IcoError(Exception):
    """Базовая ошибка конвертации."""


class ImageDecodeError(IcoError):
    """Исходное изображение не найдено или не читается."""


class InvalidSizeError(IcoError):
    """Некорректный размер иконки."""


class IconCountError(IcoError):
    """Количество кадров вне диапазона 1..255."""


class IcoWriteError(IcoError):
    """Ошибка открытия или записи выходного файла."""
