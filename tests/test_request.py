"""Tests for requests, directions and admission errors."""

import dataclasses

import pytest

from dispatch import (
    DegenerateRequestError,
    Direction,
    InvalidFloorError,
    RejectionReason,
    Request,
    RequestRejectedError,
)


class TestRequest:
    def test_direction_is_derived_from_floors(self):
        assert Request(1, 7).direction is Direction.UP
        assert Request(9, 2).direction is Direction.DOWN

    def test_same_floor_is_rejected(self):
        with pytest.raises(DegenerateRequestError) as excinfo:
            Request(4, 4)
        assert excinfo.value.reason is RejectionReason.SAME_FLOOR

    def test_requests_are_immutable(self):
        request = Request(1, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.to_floor = 5

    def test_timestamp_does_not_affect_equality(self):
        assert Request(2, 5, created_at=1.0) == Request(2, 5, created_at=99.0)

    def test_as_pending_uses_integer_direction(self):
        pending = Request(8, 3).as_pending()
        assert (pending.origin, pending.destination, pending.direction) == (8, 3, -1)


def test_direction_values_are_floor_deltas():
    assert int(Direction.UP) == 1
    assert int(Direction.DOWN) == -1
    assert int(Direction.IDLE) == 0


class TestRejectionErrors:
    def test_invalid_floor_carries_reason_and_floors(self):
        error = InvalidFloorError(0, 3, 1, 10)
        assert error.reason is RejectionReason.INVALID_FLOOR
        assert (error.from_floor, error.to_floor) == (0, 3)
        assert isinstance(error, ValueError)

    def test_base_error_requires_a_reason(self):
        error = RequestRejectedError(2, 2, RejectionReason.SAME_FLOOR, "same floor")
        assert error.reason is RejectionReason.SAME_FLOOR
        with pytest.raises(TypeError):
            RequestRejectedError(2, 2, "same floor")
