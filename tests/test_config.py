"""Tests for scheduler configuration."""

import dataclasses

import pytest

from cfs_sim.config import CPU_TIME_SLICE, IO_WAIT_TIME, NICE_0_LOAD, SchedulerConfig


class TestDefaults:
    """Verify the default tunables."""

    def test_default_values(self) -> None:
        """Defaults match the module constants."""
        config = SchedulerConfig()
        assert config.nice_0_load == NICE_0_LOAD == 1024
        assert config.cpu_time_slice == CPU_TIME_SLICE == 1
        assert config.io_wait_time == IO_WAIT_TIME == 10

    def test_frozen(self) -> None:
        """Configs cannot be mutated after creation."""
        config = SchedulerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.cpu_time_slice = 5  # type: ignore[misc]


class TestValidation:
    """Verify rejected values."""

    @pytest.mark.parametrize("field", ["nice_0_load", "cpu_time_slice", "io_wait_time"])
    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, field: str, value: int) -> None:
        """Every tunable must be positive."""
        with pytest.raises(ValueError, match=field):
            SchedulerConfig(**{field: value})

    def test_float_rejected(self) -> None:
        """Tunables are integers."""
        with pytest.raises(TypeError, match="integer"):
            SchedulerConfig(cpu_time_slice=1.5)  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        """True is not a time slice."""
        with pytest.raises(TypeError, match="integer"):
            SchedulerConfig(io_wait_time=True)


class TestMapping:
    """Verify from_mapping() and as_dict()."""

    def test_partial_mapping_fills_defaults(self) -> None:
        """Missing keys keep their defaults."""
        config = SchedulerConfig.from_mapping({"io_wait_time": 4})
        assert config == SchedulerConfig(io_wait_time=4)

    def test_unknown_key_rejected(self) -> None:
        """Typos are reported, not ignored."""
        with pytest.raises(ValueError, match="Unknown config keys: io_wait"):
            SchedulerConfig.from_mapping({"io_wait": 4})

    def test_round_trip(self) -> None:
        """as_dict() feeds back into from_mapping()."""
        config = SchedulerConfig(nice_0_load=2048, cpu_time_slice=2, io_wait_time=7)
        assert SchedulerConfig.from_mapping(config.as_dict()) == config
