"""Process subsystem — PCB, process table, ready queue and scheduler.

Re-exports public symbols so callers can write::

    from cfs_sim.process import CFSScheduler, Process, ProcessNature
"""

from cfs_sim.process.pcb import (
    NegativeRemainingWorkError,
    Process,
    ProcessNature,
    ProcessState,
)
from cfs_sim.process.ready_queue import ReadyQueue
from cfs_sim.process.scheduler import CFSScheduler
from cfs_sim.process.table import ProcessTable

__all__ = [
    "CFSScheduler",
    "NegativeRemainingWorkError",
    "Process",
    "ProcessNature",
    "ProcessState",
    "ProcessTable",
    "ReadyQueue",
]
