"""Wall-clock timer reporting milliseconds."""

from __future__ import annotations

import time


class Timer:
    """Measures the time between start() and stop(), in milliseconds."""

    def __init__(self):
        self._start = None
        self._stop = None

    def start(self):
        self._start = time.perf_counter()
        self._stop = None

    def stop(self):
        if self._start is None:
            raise RuntimeError("timer was never started")
        self._stop = time.perf_counter()

    def elapsed(self):
        """Return the measured interval in milliseconds."""
        if self._start is None or self._stop is None:
            raise RuntimeError("timer has not been started and stopped")
        return (self._stop - self._start) * 1000.0

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *args):
        self.stop()
        return False