"""Scheduler configuration.

The three tunables that shape fairness granularity:

- **NICE_0_LOAD** — the weight of a priority-0 process; the numerator
  of the weight function.
- **CPU_TIME_SLICE** — work units a CPU-bound process consumes per
  dispatch.
- **IO_WAIT_TIME** — logical time an IO-bound process spends waiting
  per dispatch before its one-unit completion step.

They live in a frozen dataclass handed to the scheduler's constructor,
so a test can build a scheduler with any combination without touching
module state.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

NICE_0_LOAD = 1024
CPU_TIME_SLICE = 1
IO_WAIT_TIME = 10


@dataclass(frozen=True)
class SchedulerConfig:
    """Immutable scheduler tunables.

    Attributes:
        nice_0_load: Weight numerator base.
        cpu_time_slice: Work units consumed per CPU-bound dispatch.
        io_wait_time: Logical units waited per IO-bound dispatch.

    """

    nice_0_load: int = NICE_0_LOAD
    cpu_time_slice: int = CPU_TIME_SLICE
    io_wait_time: int = IO_WAIT_TIME

    def __post_init__(self) -> None:
        """Reject non-integer or non-positive values."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{f.name} must be an integer, got {value!r}"
                raise TypeError(msg)
            if value <= 0:
                msg = f"{f.name} must be positive, got {value}"
                raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> SchedulerConfig:
        """Build a config from a mapping, filling gaps with defaults.

        Raises:
            ValueError: If the mapping has keys that are not config fields.

        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown config keys: {', '.join(unknown)}"
            raise ValueError(msg)
        return cls(**data)  # type: ignore[arg-type]

    def as_dict(self) -> dict[str, int]:
        """Return the config as a plain dict."""
        return asdict(self)
