from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .debounce import DEFAULT_DEBOUNCE_SECONDS, Debouncer
from .errors import InvalidParameterError
from .pipeline import ImageScruncher, ScrunchResult, ScrunchSettings

logger = logging.getLogger(__name__)

UI_DEFAULT_MAX_DIFFERENT_PIXELS = 5
MIN_MAX_DIFFERENT_PIXELS = 0
MAX_MAX_DIFFERENT_PIXELS = 100


class TuningSession:
    """Re-runs compaction of one image as the threshold control moves.

    Changes are debounced; only the last value set within the quiet period
    is processed. A failed run is reported and leaves `latest` untouched.
    """

    def __init__(
        self,
        image: bytes,
        on_result: Callable[[ScrunchResult], None],
        on_error: Optional[Callable[[Exception], None]] = None,
        scruncher: Optional[ImageScruncher] = None,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        max_different_pixels: int = UI_DEFAULT_MAX_DIFFERENT_PIXELS,
    ) -> None:
        self._image = image
        self._on_result = on_result
        self._on_error = on_error
        self._scruncher = scruncher or ImageScruncher()
        self._lock = threading.Lock()
        self._max_different_pixels = self._check_value(max_different_pixels)
        self._latest: Optional[ScrunchResult] = None
        self._debouncer = Debouncer(self._run, delay)

    @property
    def max_different_pixels(self) -> int:
        return self._max_different_pixels

    @property
    def latest(self) -> Optional[ScrunchResult]:
        with self._lock:
            return self._latest

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def start(self) -> None:
        self._debouncer.trigger(self._max_different_pixels)

    def set_max_different_pixels(self, value: int) -> None:
        self._max_different_pixels = self._check_value(value)
        self._debouncer.trigger(self._max_different_pixels)

    def flush(self) -> bool:
        return self._debouncer.flush()

    def close(self) -> None:
        self._debouncer.cancel()

    def _run(self, max_different_pixels: int) -> None:
        settings = ScrunchSettings(
            max_different_pixels=max_different_pixels,
            quantization_factor=self._scruncher.settings.quantization_factor,
        )
        scruncher = ImageScruncher(self._scruncher.codec, settings)
        try:
            result = scruncher.scrunch_bytes(self._image)
        except Exception as exc:
            logger.error("Error processing image: %s", exc)
            self._report(exc)
            return
        with self._lock:
            self._latest = result
        try:
            self._on_result(result)
        except Exception as exc:
            logger.exception("Result callback failed")
            self._report(exc)

    def _report(self, exc: Exception) -> None:
        if self._on_error is not None:
            self._on_error(exc)

    @staticmethod
    def _check_value(value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidParameterError(f"max_different_pixels must be an integer, got {value!r}")
        if not MIN_MAX_DIFFERENT_PIXELS <= value <= MAX_MAX_DIFFERENT_PIXELS:
            raise InvalidParameterError(
                f"max_different_pixels must be between {MIN_MAX_DIFFERENT_PIXELS} and {MAX_MAX_DIFFERENT_PIXELS}"
            )
        return value
