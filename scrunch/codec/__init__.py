from __future__ import annotations

from typing import Set

from .base import ImageCodec
from .pillow import PillowCodec

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".webp"}


def default_codec() -> ImageCodec:
    return PillowCodec()


__all__ = ["ImageCodec", "PillowCodec", "SUPPORTED_EXTENSIONS", "default_codec"]
