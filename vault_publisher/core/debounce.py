"""Single-slot debounce timer for export-on-change."""

import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """Coalesces bursts of triggers into one call after a quiet period.

    Only one run can be pending at a time: each trigger cancels the
    pending timer and starts a new one. A run that has already started is
    never interrupted.
    """

    def __init__(self, delay: float):
        """Initialize Debouncer.

        Args:
            delay: Seconds without a new trigger before the call fires
        """
        self.delay = delay
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None and self._timer.is_alive()

    def trigger(self, callback: Callable[..., Any], *args: Any) -> None:
        """Schedule ``callback(*args)``, replacing any pending call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._run, args=(callback, args))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _run(self, callback: Callable[..., Any], args: tuple) -> None:
        with self._lock:
            if self._timer is threading.current_thread():
                self._timer = None
        callback(*args)
