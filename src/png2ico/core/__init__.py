"""Ядро конвертера."""
from .bmp_frame import frame_size, pack_bmp_frame
from .converter import ConversionResult, IconConverter, parse_sizes, validate_sizes
from .errors import IcoError, IcoWriteError, IconCountError, ImageDecodeError, InvalidSizeError
from .ico_encoder import DirectoryEntry, IcoEncoder, IconFrame, IconSet, build_directory
from .raster import Raster
from .resampler import PillowResampler, Resampler, get_resampler
from .worker import FramePackingWorker

__all__ = [
    'ConversionResult', 'DirectoryEntry', 'FramePackingWorker', 'IcoEncoder',
    'IcoError', 'IcoWriteError', 'IconConverter', 'IconCountError', 'IconFrame',
    'IconSet', 'ImageDecodeError', 'InvalidSizeError', 'PillowResampler', 'Raster',
    'Resampler', 'build_directory', 'frame_size', 'get_resampler', 'pack_bmp_frame',
    'parse_sizes', 'validate_sizes',
]
