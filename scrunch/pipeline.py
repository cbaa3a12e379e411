from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .codec import SUPPORTED_EXTENSIONS, ImageCodec, default_codec
from .core import DEFAULT_MAX_DIFFERENT_PIXELS, DEFAULT_QUANTIZATION_FACTOR, PixelBuffer, compact

logger = logging.getLogger(__name__)

OUTPUT_PREFIX = "processed-"


@dataclass
class ScrunchSettings:
    max_different_pixels: int = DEFAULT_MAX_DIFFERENT_PIXELS
    quantization_factor: int = DEFAULT_QUANTIZATION_FACTOR


@dataclass(frozen=True)
class ScrunchResult:
    """Outcome of one decode, compact and encode pass."""

    pixels: PixelBuffer
    original_height: int
    # None when no content rows survived.
    image: Optional[bytes]

    @property
    def is_empty(self) -> bool:
        return self.pixels.is_empty

    @property
    def removed_rows(self) -> int:
        return self.original_height - self.pixels.height


class ImageScruncher:
    def __init__(self, codec: Optional[ImageCodec] = None, settings: Optional[ScrunchSettings] = None) -> None:
        self.codec = codec or default_codec()
        self.settings = settings or ScrunchSettings()

    def scrunch_file(self, path: str) -> ScrunchResult:
        self._validate_input_path(path)
        with open(path, "rb") as handle:
            data = handle.read()
        logger.info("Processing %s", path)
        return self.scrunch_bytes(data)

    def scrunch_bytes(self, data: bytes) -> ScrunchResult:
        source = self.codec.decode(data)
        return self.scrunch_pixels(source)

    def scrunch_pixels(self, source: PixelBuffer) -> ScrunchResult:
        compacted = compact(
            source,
            self.settings.max_different_pixels,
            self.settings.quantization_factor,
        )
        logger.debug(
            "Kept %d of %d rows (threshold=%d, quantization=%d)",
            compacted.height,
            source.height,
            self.settings.max_different_pixels,
            self.settings.quantization_factor,
        )
        if compacted.is_empty:
            logger.warning("No content rows left; output image is empty")
            return ScrunchResult(compacted, source.height, None)
        return ScrunchResult(compacted, source.height, self.codec.encode(compacted))

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")


def output_filename(path: str, extension: str = ".png") -> str:
    """Name for the processed copy of path, e.g. processed-shot.png."""
    stem = os.path.splitext(os.path.basename(path))[0]
    return f"{OUTPUT_PREFIX}{stem}{extension}"


def output_path_for(path: str, extension: str = ".png") -> str:
    return os.path.join(os.path.dirname(path), output_filename(path, extension))
