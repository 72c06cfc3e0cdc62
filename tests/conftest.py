# Добавляем src в sys.path, чтобы тесты работали и без установки пакета.
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest
from PIL import Image

from png2ico.core import Raster

from helpers import RED, solid_raster


@pytest.fixture
def red_raster():
    return solid_raster(64, 64)


@pytest.fixture
def gradient_raster():
    # каждый пиксель уникален: (x, y, x + y, 200)
    width, height = 5, 3
    values = [(x, y, x + y, 200) for y in range(height) for x in range(width)]
    return Raster.from_channels(width, height, values)


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    Image.new('RGBA', (64, 64), RED).save(path, 'PNG')
    return path


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "settings.json"
