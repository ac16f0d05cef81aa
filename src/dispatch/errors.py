from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    INVALID_FLOOR = "invalid-floor"
    SAME_FLOOR = "same-floor"


class RequestRejectedError(ValueError):
    """A request that cannot be admitted to the building."""

    def __init__(self, from_floor: int, to_floor: int, reason: RejectionReason, message: str) -> None:
        super().__init__(message)
        self.from_floor = from_floor
        self.to_floor = to_floor
        self.reason = reason


class InvalidFloorError(RequestRejectedError):
    def __init__(self, from_floor: int, to_floor: int, min_floor: int, max_floor: int) -> None:
        super().__init__(
            from_floor,
            to_floor,
            RejectionReason.INVALID_FLOOR,
            f"Invalid floor request: {from_floor} to {to_floor} (floors {min_floor}..{max_floor})",
        )


class DegenerateRequestError(RequestRejectedError):
    def __init__(self, floor: int) -> None:
        super().__init__(
            floor, floor, RejectionReason.SAME_FLOOR, f"Cannot request elevator to same floor ({floor})"
        )
