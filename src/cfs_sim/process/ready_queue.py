"""Ready queue — a min-heap of process handles keyed by vruntime.

CFS always runs the process that has received the least weighted CPU
time.  The queue keeps handles into a ``ProcessTable`` ordered by the
referenced process's vruntime, so ``remove_min()`` is that process.

Ties on vruntime go to the lower PID; a repeated PID (a caller
inserting the same handle twice) falls back to insertion order.  The
rule is total, so a given seed population always yields the same
execution log.

The sort key is captured when a handle is inserted.  The scheduler only
changes a process's vruntime while it is outside the queue, so the
captured key never goes stale.
"""

from __future__ import annotations

import heapq
from itertools import count
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cfs_sim.process.table import ProcessTable


class ReadyQueue:
    """Minimum-vruntime priority queue over process handles."""

    def __init__(self, table: ProcessTable) -> None:
        """Create an empty queue over *table*."""
        self._table = table
        self._heap: list[tuple[int, int, int, int]] = []
        self._sequence = count()

    def insert(self, handle: int | None) -> None:
        """Add *handle* to the queue; None is ignored.

        Uniqueness is not checked — the caller must not insert a handle
        that is already queued.
        """
        if handle is None:
            return
        process = self._table[handle]
        heapq.heappush(self._heap, (process.vruntime, process.pid, next(self._sequence), handle))

    def remove_min(self) -> int | None:
        """Remove and return the handle with the lowest vruntime, or None if empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[-1]

    def peek_min(self) -> int | None:
        """Return the handle with the lowest vruntime without removing it."""
        if not self._heap:
            return None
        return self._heap[0][-1]

    def is_empty(self) -> bool:
        """Return True if no handles are queued."""
        return not self._heap

    def __len__(self) -> int:
        """Return the number of queued handles."""
        return len(self._heap)

    def __bool__(self) -> bool:
        """Return True if any handle is queued."""
        return bool(self._heap)
