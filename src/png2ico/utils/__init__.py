"""Вспомогательные модули."""
from .paths import ensure_ico_suffix, is_png_path
from .settings import Settings

__all__ = ['Settings', 'ensure_ico_suffix', 'is_png_path']
