"""Command-line front end: ``cfs-sim``.

Runs one simulation and prints the process table before and after,
the execution log and the summary.  All formatting lives in
``cfs_sim.report``; this module only parses arguments and prints.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from cfs_sim.config import CPU_TIME_SLICE, IO_WAIT_TIME, NICE_0_LOAD, SchedulerConfig
from cfs_sim.logging import Logger, LogLevel
from cfs_sim.population import load_population, sample_processes
from cfs_sim.process.scheduler import CFSScheduler
from cfs_sim.report import format_execution_log, format_process_table, format_summary

if TYPE_CHECKING:
    from collections.abc import Sequence

EXIT_OK = 0
EXIT_USAGE = 2


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cfs-sim", description="Run a CFS scheduling simulation.")
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="JSON file with a list of process records (default: the built-in sample).",
    )
    parser.add_argument("--nice-0-load", type=int, default=NICE_0_LOAD, help="Weight of a priority-0 process.")
    parser.add_argument("--time-slice", type=int, default=CPU_TIME_SLICE, help="Work units per CPU-bound dispatch.")
    parser.add_argument("--io-wait", type=int, default=IO_WAIT_TIME, help="Wait units per IO-bound dispatch.")
    parser.add_argument("--verbose", action="store_true", help="Also print the scheduler event log.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator and print its reports.

    Returns:
        ``EXIT_OK`` on success, ``EXIT_USAGE`` on bad input or config.

    """
    args = parse_arguments(argv)
    try:
        config = SchedulerConfig(
            nice_0_load=args.nice_0_load,
            cpu_time_slice=args.time_slice,
            io_wait_time=args.io_wait,
        )
        processes = sample_processes() if args.input is None else load_population(args.input)
    except (ValueError, OSError) as e:
        print(f"cfs-sim: {e}", file=sys.stderr)
        return EXIT_USAGE

    logger = Logger(min_level=LogLevel.DEBUG if args.verbose else LogLevel.INFO)
    scheduler = CFSScheduler(config=config, logger=logger)

    print("=== CFS Scheduler Demo ===\n")
    print(format_process_table(processes))
    log = scheduler.schedule(processes)
    print()
    print(format_execution_log(log))
    print()
    print(format_process_table(processes))
    print()
    print(format_summary(len(processes), log))
    if args.verbose:
        print()
        print("\n".join(str(entry) for entry in logger.entries))
    return EXIT_OK


def run() -> None:
    """Console entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
