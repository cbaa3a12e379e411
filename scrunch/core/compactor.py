from __future__ import annotations

from typing import Tuple

from ..errors import InvalidParameterError
from .types import CHANNELS, PixelBuffer

DEFAULT_MAX_DIFFERENT_PIXELS = 10
DEFAULT_QUANTIZATION_FACTOR = 16

# Bits per quantized channel in the packed key.
KEY_CHANNEL_BITS = 4


def quantized_color_key(r: int, g: int, b: int, quantization_factor: int) -> int:
    """Pack the quantized RGB channels of a pixel into one integer key."""
    key = 0
    for value in (r, g, b):
        key = (key << KEY_CHANNEL_BITS) | (value // quantization_factor)
    return key


def count_distinct_keys(row: bytes, max_different_pixels: int, quantization_factor: int) -> int:
    """Count distinct quantized colors in a row, stopping once the threshold is exceeded.

    The returned count is exact when it is <= max_different_pixels and
    max_different_pixels + 1 otherwise.
    """
    keys = set()
    for start in range(0, len(row), CHANNELS):
        keys.add(quantized_color_key(row[start], row[start + 1], row[start + 2], quantization_factor))
        if len(keys) > max_different_pixels:
            break
    return len(keys)


def is_content_row(
    row: bytes,
    max_different_pixels: int = DEFAULT_MAX_DIFFERENT_PIXELS,
    quantization_factor: int = DEFAULT_QUANTIZATION_FACTOR,
) -> bool:
    """Return True when the row has more distinct quantized colors than the threshold."""
    return count_distinct_keys(row, max_different_pixels, quantization_factor) > max_different_pixels


def validate_parameters(max_different_pixels: int, quantization_factor: int) -> None:
    if max_different_pixels < 0:
        raise InvalidParameterError("max_different_pixels must be >= 0")
    if quantization_factor <= 0:
        raise InvalidParameterError("quantization_factor must be greater than zero")


def compact_rows(
    buffer: bytes,
    width: int,
    height: int,
    max_different_pixels: int = DEFAULT_MAX_DIFFERENT_PIXELS,
    quantization_factor: int = DEFAULT_QUANTIZATION_FACTOR,
) -> Tuple[bytes, int]:
    """Drop near-uniform rows from an RGBA buffer.

    Returns the new buffer and its height. Width is unchanged and the
    surviving rows keep their original bytes and order.
    """
    PixelBuffer(buffer, width, height).validate()
    validate_parameters(max_different_pixels, quantization_factor)
    stride = width * CHANNELS
    view = memoryview(buffer)
    out = bytearray()
    new_height = 0
    for y in range(height):
        row = view[y * stride : (y + 1) * stride]
        if is_content_row(row, max_different_pixels, quantization_factor):
            out += row
            new_height += 1
    return bytes(out), new_height


def compact(
    pixels: PixelBuffer,
    max_different_pixels: int = DEFAULT_MAX_DIFFERENT_PIXELS,
    quantization_factor: int = DEFAULT_QUANTIZATION_FACTOR,
) -> PixelBuffer:
    """Compact a PixelBuffer, returning a new one of the same width."""
    data, height = compact_rows(
        pixels.data,
        pixels.width,
        pixels.height,
        max_different_pixels,
        quantization_factor,
    )
    return PixelBuffer(data, pixels.width, height)
