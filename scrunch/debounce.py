from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional, Tuple

DEFAULT_DEBOUNCE_SECONDS = 0.333


class Debouncer:
    """Run a callback only after triggers stop arriving for `delay` seconds.

    Each trigger cancels the pending timer of the previous one. A callback
    that has already started is never interrupted.
    """

    def __init__(self, callback: Callable[..., Any], delay: float = DEFAULT_DEBOUNCE_SECONDS) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._callback = callback
        self._delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Tuple[Tuple[Any, ...], Dict[str, Any]]] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            self._cancel_locked()
            self._pending = (args, kwargs)
            timer = threading.Timer(self._delay, self._fire, args=(self._pending,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def flush(self) -> bool:
        """Run the pending call now on the calling thread. Returns False if nothing was pending."""
        with self._lock:
            call = self._pending
            self._cancel_locked()
        if call is None:
            return False
        args, kwargs = call
        self._callback(*args, **kwargs)
        return True

    def _fire(self, call: Tuple[Tuple[Any, ...], Dict[str, Any]]) -> None:
        with self._lock:
            # Superseded by a later trigger or cancelled after the timer expired.
            if self._pending is not call:
                return
            self._timer = None
            self._pending = None
        args, kwargs = call
        self._callback(*args, **kwargs)

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._pending = None
