"""cfs-sim — a Completely Fair Scheduler simulator.

Seed a population of CPU-bound and IO-bound processes, run them to
completion under weighted-vruntime fairness, and inspect the execution
log::

    from cfs_sim import CFSScheduler, sample_processes

    log = CFSScheduler().schedule(sample_processes())
"""

from cfs_sim.clock import Clock, ClockError, LogicalClock
from cfs_sim.config import CPU_TIME_SLICE, IO_WAIT_TIME, NICE_0_LOAD, SchedulerConfig
from cfs_sim.execlog import ExecutionLog, ExecutionLogEntry
from cfs_sim.logging import LogEntry, Logger, LogLevel
from cfs_sim.population import PopulationError, sample_processes
from cfs_sim.process import (
    CFSScheduler,
    NegativeRemainingWorkError,
    Process,
    ProcessNature,
    ProcessState,
    ProcessTable,
    ReadyQueue,
)

__all__ = [
    "CPU_TIME_SLICE",
    "IO_WAIT_TIME",
    "NICE_0_LOAD",
    "CFSScheduler",
    "Clock",
    "ClockError",
    "ExecutionLog",
    "ExecutionLogEntry",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LogicalClock",
    "NegativeRemainingWorkError",
    "PopulationError",
    "Process",
    "ProcessNature",
    "ProcessState",
    "ProcessTable",
    "ReadyQueue",
    "SchedulerConfig",
    "sample_processes",
]
