from __future__ import annotations


class ScrunchError(Exception):
    """Base class for errors raised by scrunch."""


class DecodeError(ScrunchError):
    """Source image could not be read."""


class InvalidDimensionsError(ScrunchError, ValueError):
    """Pixel buffer length does not match its width and height."""


class InvalidParameterError(ScrunchError, ValueError):
    """Threshold or quantization factor out of range."""


class EmptyImageError(ScrunchError):
    """Zero-height image cannot be encoded."""
