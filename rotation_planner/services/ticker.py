"""Whole-second tick source driven by a monotonic clock."""

from typing import Optional


class SecondTicker:
    """
    Converts monotonic clock readings into whole-second ticks.

    The owner polls ``due(now)`` from its own loop (a Flask request, a Tk
    ``after`` callback) and runs one clock tick per returned second. Stopping
    drops the partial second, so nothing is pending while paused.
    """

    def __init__(self) -> None:
        self._anchor: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._anchor is not None

    def start(self, now: float) -> None:
        """Begin counting from ``now``. Already running tickers keep their anchor."""
        if self._anchor is None:
            self._anchor = now

    def stop(self) -> None:
        """Stop counting and discard the partial second."""
        self._anchor = None

    def due(self, now: float) -> int:
        """Return the whole seconds elapsed since the last delivery."""
        if self._anchor is None or now < self._anchor:
            return 0
        seconds = int(now - self._anchor)
        self._anchor += seconds
        return seconds
