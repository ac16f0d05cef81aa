from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum

from scheduler import PendingRequest

from .errors import DegenerateRequestError


class Direction(IntEnum):
    """Travel direction; values double as the per-tick floor delta."""

    DOWN = -1
    IDLE = 0
    UP = 1


@dataclass(frozen=True)
class Request:
    """A single rider wanting to go from one floor to another."""

    from_floor: int
    to_floor: int
    created_at: float = field(default_factory=time.time, compare=False)

    def __post_init__(self) -> None:
        if self.from_floor == self.to_floor:
            raise DegenerateRequestError(self.from_floor)

    @property
    def direction(self) -> Direction:
        return Direction.UP if self.to_floor > self.from_floor else Direction.DOWN

    def as_pending(self) -> PendingRequest:
        return PendingRequest(
            origin=self.from_floor,
            destination=self.to_floor,
            direction=int(self.direction),
        )

    def __str__(self) -> str:
        return f"Request(from={self.from_floor}, to={self.to_floor}, direction={self.direction.name})"
