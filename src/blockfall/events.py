"""Pending spawn requests."""

from __future__ import annotations


class SpawnQueue:
    """Counter of zero-payload spawn events.

    Producers call :meth:`push`; the spawn step calls :meth:`drain`, which
    empties the queue however many events were waiting.
    """

    def __init__(self) -> None:
        self._pending = 0

    def push(self) -> None:
        self._pending += 1

    @property
    def pending(self) -> int:
        return self._pending

    def __bool__(self) -> bool:
        return self._pending > 0

    def drain(self) -> int:
        """Clear the queue and return how many events were pending."""

        count = self._pending
        self._pending = 0
        return count
