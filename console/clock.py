"""
Clock sources handed to the :class:`~queue_engine.engine.QueueEngine`.

The engine never reads an ambient clock; the console picks one of these.
"""

import time


class TickClock:
    """Monotonic integer ticks: 1, 2, 3, … (one per call)."""

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self) -> int:
        tick = self._next
        self._next += 1
        return tick

    def peek(self) -> int:
        """Last tick handed out, without advancing."""
        return self._next - 1


class WallClock:
    """Whole seconds since the epoch; consecutive calls often tie."""

    def __call__(self) -> int:
        return int(time.time())

    def peek(self) -> int:
        return int(time.time())
