"""Remove rows of mostly uniform color from images."""

from .core import PixelBuffer, compact, compact_rows
from .errors import (
    DecodeError,
    EmptyImageError,
    InvalidDimensionsError,
    InvalidParameterError,
    ScrunchError,
)
from .pipeline import ImageScruncher, ScrunchResult, ScrunchSettings, output_filename

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "EmptyImageError",
    "ImageScruncher",
    "InvalidDimensionsError",
    "InvalidParameterError",
    "PixelBuffer",
    "ScrunchError",
    "ScrunchResult",
    "ScrunchSettings",
    "compact",
    "compact_rows",
    "output_filename",
]
