from __future__ import annotations

from ..core.types import PixelBuffer


class ImageCodec:
    """Converts between encoded image files and RGBA pixel buffers."""

    output_extension = ".png"

    def decode(self, data: bytes) -> PixelBuffer:
        raise NotImplementedError

    def encode(self, pixels: PixelBuffer) -> bytes:
        raise NotImplementedError
