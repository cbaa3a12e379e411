from __future__ import annotations

import io
from typing import List, Sequence, Tuple

import pytest
from PIL import Image

Pixel = Tuple[int, int, int, int]

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def make_buffer(rows: Sequence[Sequence[Pixel]]) -> bytes:
    out = bytearray()
    for row in rows:
        for pixel in row:
            out.extend(pixel)
    return bytes(out)


def png_bytes(rows: Sequence[Sequence[Pixel]]) -> bytes:
    height = len(rows)
    width = len(rows[0])
    img = Image.frombytes("RGBA", (width, height), make_buffer(rows))
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def mixed_rows() -> List[List[Pixel]]:
    """Blank band, text-like row, blank band, text-like row."""
    busy = [BLACK, WHITE, RED, GREEN, BLUE, BLACK]
    return [
        [WHITE] * 6,
        [WHITE] * 6,
        busy,
        [WHITE] * 6,
        list(reversed(busy)),
        [WHITE] * 6,
    ]
