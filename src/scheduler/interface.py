from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Lightweight view of an elevator for scheduling decisions."""

    elevator_id: int
    floor: int
    direction: int
    load: int
    capacity: int
    destination_count: int
    doors_open: bool = False

    @property
    def available_capacity(self) -> int:
        return max(0, self.capacity - self.load)


@dataclass(frozen=True)
class PendingRequest:
    """Representation of a pickup/dropoff request for schedulers."""

    origin: int
    destination: int
    direction: int


class Scheduler(Protocol):
    """Strategy interface for assigning a request to one elevator."""

    def select_elevator(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        request: PendingRequest,
    ) -> Optional[int]:
        """
        Return the id of the elevator that should serve ``request``.

        ``None`` means no elevator can accept the request right now and
        the caller should defer it.
        """
        ...
