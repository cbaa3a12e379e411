from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidDimensionsError

CHANNELS = 4


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA pixel buffer, 4 bytes per pixel."""

    data: bytes
    width: int
    height: int

    def validate(self) -> None:
        """Validate that the byte length matches the dimensions."""
        if self.width <= 0:
            raise InvalidDimensionsError("Width must be greater than zero")
        if self.height < 0:
            raise InvalidDimensionsError("Height must not be negative")
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise InvalidDimensionsError(
                f"Buffer length {len(self.data)} does not match "
                f"{self.width}x{self.height}x{CHANNELS} = {expected}"
            )

    @property
    def row_stride(self) -> int:
        return self.width * CHANNELS

    @property
    def is_empty(self) -> bool:
        return self.height == 0

    def row(self, index: int) -> bytes:
        if not 0 <= index < self.height:
            raise IndexError(f"Row {index} out of range for height {self.height}")
        stride = self.row_stride
        start = index * stride
        return bytes(self.data[start : start + stride])
