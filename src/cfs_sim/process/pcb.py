"""Process and Process Control Block (PCB).

A simulated process carries just what the fair scheduler needs: a PID,
a priority, a nature (CPU-bound or IO-bound), the work it still has to
do, and the virtual runtime it has accumulated so far.

Identity, priority and nature are fixed at creation.  Only the
scheduler mutates ``vruntime`` and ``remaining_work``, and only through
``charge()`` and ``consume()``, which refuse to move either value the
wrong way.

Processes follow a strict state machine — each transition method
enforces that the process is in the correct source state::

    NEW → READY ⇄ RUNNING → TERMINATED
                    ↓  ↑
                  WAITING
"""

from __future__ import annotations

from enum import StrEnum
from itertools import count


class ProcessState(StrEnum):
    """Lifecycle states of a simulated process.

    - NEW: created, not yet seeded into a ready queue.
    - READY: waiting in the ready queue for CPU time.
    - RUNNING: currently dispatched.
    - WAITING: in the IO-wait phase of an IO-bound dispatch.
    - TERMINATED: all work done; never dispatched again.
    """

    NEW = "new"
    READY = "ready"
    RUNNING = "running"
    WAITING = "waiting"
    TERMINATED = "terminated"


class ProcessNature(StrEnum):
    """How a process spends a dispatch."""

    CPU_BOUND = "cpu"
    IO_BOUND = "io"


class NegativeRemainingWorkError(RuntimeError):
    """Raised when a process is asked to do more work than it has left."""


_pid_counter = count(start=1)


class Process:
    """A simulated process (the Process Control Block).

    State transitions are enforced: calling dispatch() on a NEW process
    raises RuntimeError, because it must be admitted first.
    """

    def __init__(
        self,
        *,
        burst_time: int,
        priority: int = 0,
        nature: ProcessNature = ProcessNature.CPU_BOUND,
        pid: int | None = None,
        name: str | None = None,
        vruntime: int = 0,
    ) -> None:
        """Create a new process in the NEW state.

        Args:
            burst_time: Total work the process must complete.
            priority: Scheduling priority (lower = more favoured), >= 0.
            nature: CPU-bound or IO-bound dispatch policy.
            pid: Explicit process id; drawn from a counter when omitted.
            name: Human-readable label; defaults to ``p<pid>``.
            vruntime: Starting virtual runtime.

        Raises:
            ValueError: If burst_time, priority or vruntime is negative.

        """
        if burst_time < 0:
            msg = f"burst_time must be non-negative, got {burst_time}"
            raise ValueError(msg)
        if priority < 0:
            msg = f"priority must be non-negative, got {priority}"
            raise ValueError(msg)
        if vruntime < 0:
            msg = f"vruntime must be non-negative, got {vruntime}"
            raise ValueError(msg)
        self._pid: int = next(_pid_counter) if pid is None else pid
        self._name: str = name if name is not None else f"p{self._pid}"
        self._priority: int = priority
        self._nature: ProcessNature = ProcessNature(nature)
        self._burst_time: int = burst_time
        self._remaining_work: int = burst_time
        self._vruntime: int = vruntime
        self._state: ProcessState = ProcessState.NEW

    @property
    def pid(self) -> int:
        """Return the unique process identifier."""
        return self._pid

    @property
    def name(self) -> str:
        """Return the process name."""
        return self._name

    @property
    def priority(self) -> int:
        """Return the scheduling priority (immutable)."""
        return self._priority

    @property
    def nature(self) -> ProcessNature:
        """Return the process nature (immutable)."""
        return self._nature

    @property
    def burst_time(self) -> int:
        """Return the work the process was created with."""
        return self._burst_time

    @property
    def remaining_work(self) -> int:
        """Return the work still to be done."""
        return self._remaining_work

    @property
    def vruntime(self) -> int:
        """Return the accumulated virtual runtime."""
        return self._vruntime

    @property
    def state(self) -> ProcessState:
        """Return the current process state."""
        return self._state

    @property
    def is_complete(self) -> bool:
        """Return True once no work remains."""
        return self._remaining_work == 0

    def charge(self, delta: int) -> None:
        """Add *delta* to the virtual runtime.

        Raises:
            ValueError: If *delta* is negative (vruntime never decreases).

        """
        if delta < 0:
            msg = f"Cannot charge process {self._pid} a negative vruntime {delta}"
            raise ValueError(msg)
        self._vruntime += delta

    def consume(self, units: int) -> None:
        """Subtract *units* of work.

        Raises:
            NegativeRemainingWorkError: If *units* exceeds the remaining work.
            ValueError: If *units* is not positive.

        """
        if units <= 0:
            msg = f"Work consumed must be positive, got {units}"
            raise ValueError(msg)
        if units > self._remaining_work:
            msg = (
                f"Process {self._pid} has {self._remaining_work} work left, "
                f"cannot consume {units}"
            )
            raise NegativeRemainingWorkError(msg)
        self._remaining_work -= units

    def _transition(self, action: str, expected: ProcessState, target: ProcessState) -> None:
        """Enforce a state transition.

        Raises:
            RuntimeError: If the process is not in the expected state.

        """
        if self._state is not expected:
            msg = f"Cannot {action}: process {self._pid} is {self._state}, expected {expected}"
            raise RuntimeError(msg)
        self._state = target

    def admit(self) -> None:
        """Transition NEW → READY."""
        self._transition("admit", ProcessState.NEW, ProcessState.READY)

    def dispatch(self) -> None:
        """Transition READY → RUNNING."""
        self._transition("dispatch", ProcessState.READY, ProcessState.RUNNING)

    def preempt(self) -> None:
        """Transition RUNNING → READY. Back into the ready queue."""
        self._transition("preempt", ProcessState.RUNNING, ProcessState.READY)

    def wait(self) -> None:
        """Transition RUNNING → WAITING. Start the IO-wait phase."""
        self._transition("wait", ProcessState.RUNNING, ProcessState.WAITING)

    def resume(self) -> None:
        """Transition WAITING → RUNNING. IO finished, do the completion step."""
        self._transition("resume", ProcessState.WAITING, ProcessState.RUNNING)

    def terminate(self) -> None:
        """Transition RUNNING → TERMINATED. All work done."""
        self._transition("terminate", ProcessState.RUNNING, ProcessState.TERMINATED)

    def __repr__(self) -> str:
        """Return a debug-friendly representation."""
        return (
            f"Process(pid={self._pid}, priority={self._priority}, nature={self._nature}, "
            f"remaining_work={self._remaining_work}, vruntime={self._vruntime}, "
            f"state={self._state})"
        )
