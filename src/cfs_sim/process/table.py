"""Process table — an arena of processes addressed by integer handles.

The ready queue and the scheduler loop never pass process objects
around between iterations; they pass *handles*, small integers that
index into this table.  A handle stays valid for the table's lifetime,
so nothing can be freed twice or used after it is gone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cfs_sim.process.pcb import Process


class ProcessTable:
    """Append-only store of processes, indexed by handle."""

    def __init__(self) -> None:
        """Create an empty table."""
        self._records: list[Process] = []
        self._by_pid: dict[int, int] = {}

    def register(self, process: Process) -> int:
        """Store *process* and return its handle.

        Raises:
            ValueError: If a process with the same PID is already stored.

        """
        if process.pid in self._by_pid:
            msg = f"Process {process.pid} is already registered"
            raise ValueError(msg)
        handle = len(self._records)
        self._records.append(process)
        self._by_pid[process.pid] = handle
        return handle

    def handle_of(self, pid: int) -> int | None:
        """Return the handle for *pid*, or None if unknown."""
        return self._by_pid.get(pid)

    def __contains__(self, pid: object) -> bool:
        """Return True if a process with this PID is stored."""
        return pid in self._by_pid

    def __getitem__(self, handle: int) -> Process:
        """Return the process stored under *handle*."""
        return self._records[handle]

    def __len__(self) -> int:
        """Return the number of stored processes."""
        return len(self._records)

    def __iter__(self) -> Iterator[Process]:
        """Iterate processes in registration order."""
        return iter(self._records)
