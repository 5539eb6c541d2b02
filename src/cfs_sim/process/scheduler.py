"""CFS scheduler — runs a population to completion, fairest-first.

The Completely Fair Scheduler tracks virtual runtime (vruntime) for
every process: how much *weighted* CPU time it has consumed.  It always
runs the process with the lowest vruntime next.  A process's weight
comes from its priority::

    weight(priority) = NICE_0_LOAD / (priority + 1)

and every unit of work it does costs ``NICE_0_LOAD / weight`` vruntime,
which works out to ``priority + 1`` per unit.  Priority-0 processes
accrue vruntime slowest, so they come back to the front of the queue
soonest and get the most turns.

Two dispatch policies, chosen by the process's nature:

- **CPU-bound**: run one time slice (or whatever work is left, if
  less), charge vruntime for it.
- **IO-bound**: wait ``IO_WAIT_TIME`` units, charged to vruntime as if
  it were work, then do one unit of real work, charged again.  Burst
  time counts completion units only, so an IO-bound process pays about
  ten times the vruntime per unit of progress.  That asymmetry is the
  policy: time spent waiting on IO counts against fairness.

After either policy a process with work left goes back into the ready
queue; one with none is terminated and never seen again.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import TYPE_CHECKING

from cfs_sim.clock import ClockError, LogicalClock
from cfs_sim.config import SchedulerConfig
from cfs_sim.execlog import ExecutionLog, ExecutionLogEntry
from cfs_sim.logging import Logger, LogLevel
from cfs_sim.process.pcb import NegativeRemainingWorkError, ProcessNature, ProcessState
from cfs_sim.process.ready_queue import ReadyQueue
from cfs_sim.process.table import ProcessTable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cfs_sim.clock import Clock
    from cfs_sim.process.pcb import Process

_SOURCE = "scheduler"
IO_COMPLETION_WORK = 1


class CFSScheduler:
    """Weighted-vruntime scheduler over a fixed seed population.

    The scheduler itself is stateless between runs: each ``schedule()``
    call builds its own process table, ready queue, clock and log.
    Only the config and the event logger are shared.
    """

    def __init__(
        self,
        *,
        config: SchedulerConfig | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a scheduler.

        Args:
            config: Fairness tunables; defaults to ``SchedulerConfig()``.
            logger: Event log to record into; a fresh one if omitted.

        """
        self._config = config if config is not None else SchedulerConfig()
        self._logger = logger if logger is not None else Logger()

    @property
    def config(self) -> SchedulerConfig:
        """Return the scheduler's tunables."""
        return self._config

    @property
    def logger(self) -> Logger:
        """Return the event log."""
        return self._logger

    def weight(self, priority: int) -> Fraction:
        """Return the scheduling weight for *priority*.

        Lower priority number → higher weight → slower vruntime growth.
        The value is an exact fraction so the vruntime formula never
        suffers float rounding.
        """
        return Fraction(self._config.nice_0_load, priority + 1)

    def vruntime_delta(self, exec_units: int, priority: int) -> int:
        """Return the vruntime cost of *exec_units* at *priority*.

        ``floor(exec_units * NICE_0_LOAD / weight(priority))``, which is
        exactly ``exec_units * (priority + 1)``.
        """
        return math.floor(exec_units * self._config.nice_0_load / self.weight(priority))

    def schedule(
        self,
        processes: Iterable[Process | None],
        *,
        clock: Clock | None = None,
    ) -> ExecutionLog:
        """Run every seeded process to completion.

        Args:
            processes: The seed population.  ``None`` entries, processes
                with no work and repeated PIDs are skipped with a warning.
            clock: Timestamp source; a fresh ``LogicalClock`` if omitted.

        Returns:
            The execution log, one entry per dispatch, in dispatch order.

        Raises:
            RuntimeError: If a seed is neither NEW nor READY.
            ClockError: If the clock runs backwards during a dispatch.

        """
        clock = clock if clock is not None else LogicalClock()
        table = ProcessTable()
        queue = ReadyQueue(table)
        log = ExecutionLog()

        self._seed(processes, table, queue)
        self._logger.log(
            LogLevel.INFO,
            f"Run started with {len(queue)} processes at t={clock.now()}",
            source=_SOURCE,
        )

        while not queue.is_empty():
            handle = queue.remove_min()
            if handle is None:
                break
            process = table[handle]

            start_time = clock.now()
            self._dispatch(process, clock)
            end_time = clock.now()
            if end_time < start_time:
                msg = f"Clock went backwards dispatching process {process.pid}: {start_time} -> {end_time}"
                raise ClockError(msg)

            log.append(
                ExecutionLogEntry(
                    pid=process.pid,
                    start_time=start_time,
                    end_time=end_time,
                    vruntime=process.vruntime,
                ),
            )
            self._logger.log(
                LogLevel.DEBUG,
                f"Ran process {process.pid} [{start_time}, {end_time}] vruntime={process.vruntime}",
                source=_SOURCE,
                pid=process.pid,
            )

            if process.is_complete:
                process.terminate()
                self._logger.log(
                    LogLevel.INFO,
                    f"Process {process.pid} completed at t={end_time}",
                    source=_SOURCE,
                    pid=process.pid,
                )
            else:
                process.preempt()
                queue.insert(handle)

        self._logger.log(
            LogLevel.INFO,
            f"Run finished: {len(log)} slices, makespan {log.makespan}",
            source=_SOURCE,
        )
        return log

    def _seed(
        self,
        processes: Iterable[Process | None],
        table: ProcessTable,
        queue: ReadyQueue,
    ) -> None:
        """Admit every runnable seed and queue its handle."""
        for process in processes:
            if process is None:
                self._logger.log(LogLevel.WARNING, "Skipped absent process in seed list", source=_SOURCE)
                continue
            if process.pid in table:
                self._logger.log(
                    LogLevel.WARNING,
                    f"Skipped duplicate process {process.pid}",
                    source=_SOURCE,
                    pid=process.pid,
                )
                continue
            if process.remaining_work <= 0:
                self._logger.log(
                    LogLevel.WARNING,
                    f"Skipped process {process.pid}: no work remaining",
                    source=_SOURCE,
                    pid=process.pid,
                )
                continue
            if process.state is ProcessState.NEW:
                process.admit()
            elif process.state is not ProcessState.READY:
                msg = f"Cannot seed process {process.pid}: state is {process.state}, expected new or ready"
                raise RuntimeError(msg)
            queue.insert(table.register(process))

    def _dispatch(self, process: Process, clock: Clock) -> None:
        """Run one slice of *process* according to its nature.

        Raises:
            NegativeRemainingWorkError: If the process has no work left.

        """
        if process.remaining_work <= 0:
            msg = f"Dispatched process {process.pid} with remaining work {process.remaining_work}"
            raise NegativeRemainingWorkError(msg)
        process.dispatch()
        if process.nature is ProcessNature.CPU_BOUND:
            self._run_cpu_bound(process, clock)
        else:
            self._run_io_bound(process, clock)

    def _run_cpu_bound(self, process: Process, clock: Clock) -> None:
        """Consume one time slice (or the remainder, if shorter)."""
        exec_units = min(self._config.cpu_time_slice, process.remaining_work)
        process.consume(exec_units)
        process.charge(self.vruntime_delta(exec_units, process.priority))
        clock.advance(exec_units)

    def _run_io_bound(self, process: Process, clock: Clock) -> None:
        """Wait on IO, then do one unit of completion work."""
        wait = self._config.io_wait_time
        process.wait()
        process.charge(self.vruntime_delta(wait, process.priority))
        clock.advance(wait)
        process.resume()

        process.consume(IO_COMPLETION_WORK)
        process.charge(self.vruntime_delta(IO_COMPLETION_WORK, process.priority))
        clock.advance(IO_COMPLETION_WORK)
