"""Repeating interval clock gating the fall step."""

from __future__ import annotations

from .config import FALL_INTERVAL


class FallTimer:
    """Accumulate elapsed time and signal once per completed interval.

    Several intervals may elapse within one slow frame.  They are all consumed
    by that :meth:`tick` but only raise a single readiness flag, which the fall
    step picks up with :meth:`consume_if_ready`.
    """

    def __init__(self, interval: float = FALL_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("Interval must be positive")
        self.interval = interval
        self.elapsed = 0.0
        self.times_finished_last_tick = 0
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    def tick(self, elapsed: float) -> None:
        """Advance the clock by ``elapsed`` seconds."""

        if elapsed < 0:
            raise ValueError("Elapsed time cannot be negative")
        self.elapsed += elapsed
        finished = int(self.elapsed // self.interval)
        self.times_finished_last_tick = finished
        if finished:
            self.elapsed -= finished * self.interval
            self._ready = True

    def consume_if_ready(self) -> bool:
        """Return ``True`` and clear readiness if an interval has completed."""

        if not self._ready:
            return False
        self._ready = False
        return True

    def reset(self) -> None:
        self.elapsed = 0.0
        self.times_finished_last_tick = 0
        self._ready = False
