"""Seed populations — where processes come from.

Two sources:

- ``sample_processes()`` — the fixed five-process demo population.
- Records — plain dicts (from JSON, a web request, a test) turned into
  processes by ``process_from_record()``.  A record looks like::

      {"pid": 1, "priority": 0, "burst_time": 15, "nature": "cpu"}

  with optional ``name`` and ``vruntime``.  ``nature`` accepts ``cpu`` /
  ``io`` or the enum names ``CPU_BOUND`` / ``IO_BOUND``, any case.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from cfs_sim.process.pcb import Process, ProcessNature

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_REQUIRED_KEYS = ("pid", "priority", "burst_time", "nature")
_OPTIONAL_KEYS = ("name", "vruntime")


class PopulationError(ValueError):
    """Raised when a process record cannot be turned into a process."""


def sample_processes() -> list[Process]:
    """Return the demo population: three CPU-bound and two IO-bound processes."""
    return [
        Process(pid=1, priority=0, burst_time=15, nature=ProcessNature.CPU_BOUND),
        Process(pid=2, priority=5, burst_time=20, nature=ProcessNature.IO_BOUND),
        Process(pid=3, priority=2, burst_time=10, nature=ProcessNature.CPU_BOUND),
        Process(pid=4, priority=1, burst_time=25, nature=ProcessNature.IO_BOUND),
        Process(pid=5, priority=3, burst_time=12, nature=ProcessNature.CPU_BOUND),
    ]


def parse_nature(raw: object) -> ProcessNature:
    """Parse a nature string such as ``"cpu"`` or ``"IO_BOUND"``.

    Raises:
        PopulationError: If the value names no known nature.

    """
    if isinstance(raw, ProcessNature):
        return raw
    text = str(raw).strip().lower()
    for nature in ProcessNature:
        if text in (nature.value, nature.name.lower()):
            return nature
    msg = f"Unknown process nature: {raw!r}"
    raise PopulationError(msg)


def _int_field(record: Mapping[str, object], key: str) -> int:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Field {key!r} must be an integer, got {value!r}"
        raise PopulationError(msg)
    return value


def process_from_record(record: Mapping[str, object]) -> Process:
    """Build a process from a record.

    Raises:
        PopulationError: On missing or unknown keys, wrong types, or
            values the Process constructor rejects.

    """
    missing = [key for key in _REQUIRED_KEYS if key not in record]
    if missing:
        msg = f"Process record missing keys: {', '.join(missing)}"
        raise PopulationError(msg)
    unknown = sorted(set(record) - set(_REQUIRED_KEYS) - set(_OPTIONAL_KEYS))
    if unknown:
        msg = f"Process record has unknown keys: {', '.join(unknown)}"
        raise PopulationError(msg)

    name = record.get("name")
    try:
        return Process(
            pid=_int_field(record, "pid"),
            priority=_int_field(record, "priority"),
            burst_time=_int_field(record, "burst_time"),
            nature=parse_nature(record["nature"]),
            name=None if name is None else str(name),
            vruntime=_int_field(record, "vruntime") if "vruntime" in record else 0,
        )
    except PopulationError:
        raise
    except ValueError as e:
        raise PopulationError(str(e)) from e


def processes_from_records(records: Iterable[Mapping[str, object]]) -> list[Process]:
    """Build a population from records, rejecting repeated PIDs.

    Raises:
        PopulationError: If any record is invalid or a PID repeats.

    """
    processes: list[Process] = []
    seen: set[int] = set()
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            msg = f"Record {index} is not an object"
            raise PopulationError(msg)
        process = process_from_record(record)
        if process.pid in seen:
            msg = f"Duplicate pid {process.pid} in record {index}"
            raise PopulationError(msg)
        seen.add(process.pid)
        processes.append(process)
    return processes


def process_to_record(process: Process, *, progress: bool = False) -> dict[str, object]:
    """Return the record form of *process*.

    With ``progress=True`` the record also carries ``remaining_work``
    and ``state``; those keys are output-only and are rejected by
    ``process_from_record()``.
    """
    record: dict[str, object] = {
        "pid": process.pid,
        "name": process.name,
        "priority": process.priority,
        "burst_time": process.burst_time,
        "nature": process.nature.value,
        "vruntime": process.vruntime,
    }
    if progress:
        record["remaining_work"] = process.remaining_work
        record["state"] = process.state.value
    return record


def load_population(path: str | Path) -> list[Process]:
    """Load a population from a JSON file holding a list of records.

    Raises:
        PopulationError: If the file is not a JSON list of valid records.

    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"{path}: invalid JSON ({e.msg})"
        raise PopulationError(msg) from e
    if not isinstance(data, list):
        msg = f"{path}: expected a JSON list of process records"
        raise PopulationError(msg)
    return processes_from_records(data)
