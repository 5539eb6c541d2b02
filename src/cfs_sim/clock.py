"""Logical clock — the timestamp source for execution slices.

The scheduler never sleeps.  Instead it advances a clock by the number
of logical units each dispatch consumes and reads it before and after,
so every execution-log timestamp is deterministic.

Any object with ``now()`` and ``advance()`` satisfies the ``Clock``
protocol; ``LogicalClock`` is the monotonic counter used by default.
"""

from typing import Protocol


class ClockError(RuntimeError):
    """Raised when a clock reports time running backwards."""


class Clock(Protocol):
    """Interface every timestamp source must satisfy."""

    def now(self) -> int:
        """Return the current logical time."""
        ...  # pragma: no cover

    def advance(self, units: int) -> None:
        """Move time forward by *units*."""
        ...  # pragma: no cover


class LogicalClock:
    """A monotonic tick counter."""

    def __init__(self, *, start: int = 0) -> None:
        """Create a clock reading *start*.

        Raises:
            ValueError: If *start* is negative.

        """
        if start < 0:
            msg = f"Clock start must be non-negative, got {start}"
            raise ValueError(msg)
        self._now = start

    def now(self) -> int:
        """Return the current tick."""
        return self._now

    def advance(self, units: int) -> None:
        """Advance the clock.

        Raises:
            ValueError: If *units* is negative.

        """
        if units < 0:
            msg = f"Cannot advance clock by {units}"
            raise ValueError(msg)
        self._now += units

    def __repr__(self) -> str:
        """Return a debug-friendly representation."""
        return f"LogicalClock(now={self._now})"
