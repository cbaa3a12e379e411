from __future__ import annotations

import io
import logging

from PIL import Image, ImageOps

from ..core.types import PixelBuffer
from ..errors import DecodeError, EmptyImageError
from .base import ImageCodec

logger = logging.getLogger(__name__)


class PillowCodec(ImageCodec):
    output_format = "PNG"
    output_extension = ".png"

    def decode(self, data: bytes) -> PixelBuffer:
        try:
            img = self._normalize_image(self._load_image(data))
        except Exception as exc:
            raise DecodeError(f"Cannot read image: {exc}") from exc
        logger.debug("Decoded %dx%d image", img.width, img.height)
        return PixelBuffer(img.tobytes(), img.width, img.height)

    def encode(self, pixels: PixelBuffer) -> bytes:
        pixels.validate()
        if pixels.is_empty:
            raise EmptyImageError("Cannot encode an image with zero height")
        img = Image.frombytes("RGBA", (pixels.width, pixels.height), pixels.data)
        out = io.BytesIO()
        img.save(out, format=self.output_format)
        return out.getvalue()

    @staticmethod
    def _load_image(data: bytes) -> Image.Image:
        with Image.open(io.BytesIO(data)) as img:
            # Animated formats: first frame only.
            img.seek(0)
            img = ImageOps.exif_transpose(img)
            img.load()
            return img.copy()

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode != "RGBA":
            return img.convert("RGBA")
        return img
