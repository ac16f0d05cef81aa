"""Tests for building configuration."""

import pytest

from dispatch import BuildingConfig


def test_defaults():
    config = BuildingConfig()
    assert (config.min_floor, config.max_floor) == (1, 10)
    assert config.elevator_count == 3
    assert config.capacity == 8
    assert config.batch_size == 2
    assert config.unload_floor_threshold == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_floor": 5, "max_floor": 4},
        {"elevator_count": -1},
        {"capacity": 0},
        {"batch_size": 0},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        BuildingConfig(**kwargs)


def test_floor_validation_is_inclusive():
    config = BuildingConfig(min_floor=-2, max_floor=3)
    assert config.is_valid_floor(-2)
    assert config.is_valid_floor(3)
    assert not config.is_valid_floor(4)


def test_from_dict():
    config = BuildingConfig.from_dict({"max_floor": 20, "elevator_count": 4})
    assert config.max_floor == 20
    assert config.elevator_count == 4


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="num_floors"):
        BuildingConfig.from_dict({"num_floors": 10})
