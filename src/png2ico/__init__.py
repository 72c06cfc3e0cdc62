"""Конвертер PNG -> ICO с 32-битными BMP кадрами."""
__version__ = "1.0.0"
