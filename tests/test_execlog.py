"""Tests for execution log entries and the execution log."""

import dataclasses

import pytest

from cfs_sim.execlog import ExecutionLog, ExecutionLogEntry


def _log(*spans: tuple[int, int, int]) -> ExecutionLog:
    """Build a log from (pid, start, end) triples."""
    log = ExecutionLog()
    for pid, start, end in spans:
        log.append(ExecutionLogEntry(pid=pid, start_time=start, end_time=end))
    return log


class TestExecutionLogEntry:
    """Verify a single slice record."""

    def test_duration(self) -> None:
        """Duration is end minus start."""
        entry = ExecutionLogEntry(pid=1, start_time=4, end_time=15)
        expected = 11
        assert entry.duration == expected

    def test_zero_length_slice_allowed(self) -> None:
        """end == start is a valid (empty) slice."""
        assert ExecutionLogEntry(pid=1, start_time=3, end_time=3).duration == 0

    def test_end_before_start_rejected(self) -> None:
        """A slice cannot have negative duration."""
        with pytest.raises(ValueError, match="before it starts"):
            ExecutionLogEntry(pid=1, start_time=5, end_time=4)

    def test_frozen(self) -> None:
        """Entries are read-only after creation."""
        entry = ExecutionLogEntry(pid=1, start_time=0, end_time=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.pid = 2  # type: ignore[misc]

    def test_as_dict(self) -> None:
        """as_dict includes the derived duration."""
        entry = ExecutionLogEntry(pid=2, start_time=1, end_time=12, vruntime=66)
        assert entry.as_dict() == {
            "pid": 2,
            "start_time": 1,
            "end_time": 12,
            "vruntime": 66,
            "duration": 11,
        }


class TestExecutionLog:
    """Verify the ordered collection of slices."""

    def test_empty(self) -> None:
        """A new log is empty with zero makespan."""
        log = ExecutionLog()
        assert len(log) == 0
        assert log.makespan == 0
        assert log.dispatch_counts() == {}

    def test_order_preserved(self) -> None:
        """Slices stay in append order."""
        log = _log((1, 0, 1), (2, 1, 12), (1, 12, 13))
        assert log.pids == [1, 2, 1]
        assert log[1].pid == 2
        assert [e.pid for e in log[1:]] == [2, 1]

    def test_for_pid(self) -> None:
        """for_pid returns one process's slices in order."""
        log = _log((1, 0, 1), (2, 1, 12), (1, 12, 13))
        assert [e.start_time for e in log.for_pid(1)] == [0, 12]

    def test_dispatch_counts(self) -> None:
        """Counts slices per PID."""
        log = _log((1, 0, 1), (2, 1, 12), (1, 12, 13))
        assert log.dispatch_counts() == {1: 2, 2: 1}

    def test_makespan_is_last_end(self) -> None:
        """Makespan is the end of the final slice."""
        expected = 13
        assert _log((1, 0, 1), (1, 12, 13)).makespan == expected

    def test_entries_is_snapshot(self) -> None:
        """Mutating the entries list leaves the log alone."""
        log = _log((1, 0, 1))
        log.entries.clear()
        assert len(log) == 1
