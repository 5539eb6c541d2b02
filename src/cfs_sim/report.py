"""Text reports for a simulation run.

Pure functions that turn processes and execution logs into printable
tables.  They return strings and never print, so the CLI stays a thin
I/O wrapper and the formatting is testable on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cfs_sim.execlog import ExecutionLog
    from cfs_sim.process.pcb import Process

_PROCESS_RULE = 50
_LOG_RULE = 60


def format_process_table(processes: Iterable[Process | None]) -> str:
    """Render PID, priority, remaining burst, vruntime and type per process.

    ``None`` entries are left out.
    """
    lines = [
        f"{'PID':>5} {'Prio':>9} {'Burst':>11} {'VRun':>11} {'Type':>6}",
        "-" * _PROCESS_RULE,
    ]
    lines.extend(
        f"{p.pid:>5} {p.priority:>9} {p.remaining_work:>11} {p.vruntime:>11} "
        f"{p.nature.value.upper():>6}"
        for p in processes
        if p is not None
    )
    return "\n".join(lines)


def format_execution_log(log: ExecutionLog) -> str:
    """Render one row per execution slice: PID, start, end and duration."""
    lines = [
        f"{'PID':>5} {'Start':>10} {'End':>10} {'Duration':>10} {'VRun':>10}",
        "-" * _LOG_RULE,
    ]
    lines.extend(
        f"{e.pid:>5} {e.start_time:>10} {e.end_time:>10} {e.duration:>10} {e.vruntime:>10}"
        for e in log
    )
    return "\n".join(lines)


def format_summary(process_count: int, log: ExecutionLog) -> str:
    """Render the run summary with per-process slice counts."""
    lines = [
        "=== Summary ===",
        f"Processes scheduled: {process_count}",
        f"Execution slices  : {len(log)}",
        f"Makespan          : {log.makespan}",
    ]
    for pid, slices in sorted(log.dispatch_counts().items()):
        entries = log.for_pid(pid)
        lines.append(f"  pid {pid:>3}: {slices:>3} slices, finished at {entries[-1].end_time}")
    return "\n".join(lines)
