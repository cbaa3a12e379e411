from .compactor import (
    DEFAULT_MAX_DIFFERENT_PIXELS,
    DEFAULT_QUANTIZATION_FACTOR,
    compact,
    compact_rows,
    count_distinct_keys,
    is_content_row,
    quantized_color_key,
)
from .types import CHANNELS, PixelBuffer

__all__ = [
    "CHANNELS",
    "DEFAULT_MAX_DIFFERENT_PIXELS",
    "DEFAULT_QUANTIZATION_FACTOR",
    "PixelBuffer",
    "compact",
    "compact_rows",
    "count_distinct_keys",
    "is_content_row",
    "quantized_color_key",
]
