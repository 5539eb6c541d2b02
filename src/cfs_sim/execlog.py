"""Execution log — one record per dispatch.

Every trip through the scheduler loop produces exactly one
``ExecutionLogEntry``: which process ran, when its slice started and
ended on the logical clock, and the vruntime it was left with.  The
``ExecutionLog`` keeps them in dispatch order, which *is* the
observable scheduling decision sequence.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class ExecutionLogEntry:
    """A single execution slice.

    Attributes:
        pid: The process that ran.
        start_time: Logical time the slice began.
        end_time: Logical time the slice ended (never before start_time).
        vruntime: The process's vruntime after the slice.

    """

    pid: int
    start_time: int
    end_time: int
    vruntime: int = 0

    def __post_init__(self) -> None:
        """Reject slices that end before they start."""
        if self.end_time < self.start_time:
            msg = f"Slice for process {self.pid} ends at {self.end_time} before it starts at {self.start_time}"
            raise ValueError(msg)

    @property
    def duration(self) -> int:
        """Return the slice length in logical units."""
        return self.end_time - self.start_time

    def as_dict(self) -> dict[str, int]:
        """Return the entry as a plain dict."""
        return {**asdict(self), "duration": self.duration}


class ExecutionLog:
    """Append-only, ordered collection of execution slices for one run."""

    def __init__(self) -> None:
        """Create an empty log."""
        self._entries: list[ExecutionLogEntry] = []

    def append(self, entry: ExecutionLogEntry) -> None:
        """Record a slice at the end of the log."""
        self._entries.append(entry)

    @property
    def entries(self) -> list[ExecutionLogEntry]:
        """Return a snapshot of all entries in dispatch order."""
        return list(self._entries)

    @property
    def pids(self) -> list[int]:
        """Return the dispatch order as a list of PIDs."""
        return [e.pid for e in self._entries]

    @property
    def makespan(self) -> int:
        """Return the end time of the last slice (0 for an empty log)."""
        if not self._entries:
            return 0
        return self._entries[-1].end_time

    def for_pid(self, pid: int) -> list[ExecutionLogEntry]:
        """Return the slices of one process, in order."""
        return [e for e in self._entries if e.pid == pid]

    def dispatch_counts(self) -> dict[int, int]:
        """Return how many slices each process received."""
        return dict(Counter(e.pid for e in self._entries))

    def __len__(self) -> int:
        """Return the number of slices."""
        return len(self._entries)

    def __iter__(self) -> Iterator[ExecutionLogEntry]:
        """Iterate slices in dispatch order."""
        return iter(self._entries)

    @overload
    def __getitem__(self, index: int) -> ExecutionLogEntry: ...

    @overload
    def __getitem__(self, index: slice) -> list[ExecutionLogEntry]: ...

    def __getitem__(self, index: int | slice) -> ExecutionLogEntry | list[ExecutionLogEntry]:
        """Return one slice, or a list of slices for a slice index."""
        return self._entries[index]
