from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Optional, Set

from scheduler import WRONG_WAY_PENALTY, ElevatorSnapshot, calculate_cost

from .request import Direction, Request

logger = logging.getLogger(__name__)

EventSink = Callable[[str, dict], None]


@dataclass
class Elevator:
    """One car: position, travel direction, pending stops and passenger count.

    Passenger exchange works in fixed batches. Every stop above
    ``unload_floor_threshold`` lets up to ``batch_size`` riders off, and up
    to ``batch_size`` riders board while any request is queued, regardless
    of which requests actually start or end on that floor.
    """

    elevator_id: int
    capacity: int
    current_floor: int = 0
    direction: Direction = Direction.IDLE
    current_load: int = 0
    destination_floors: Set[int] = field(default_factory=set)
    request_queue: Deque[Request] = field(default_factory=deque)
    doors_open: bool = False
    batch_size: int = 2
    unload_floor_threshold: int = 0
    wrong_way_penalty: int = WRONG_WAY_PENALTY
    emit: Optional[EventSink] = field(default=None, repr=False, compare=False)

    def add_destination(self, floor: int) -> None:
        self.destination_floors.add(floor)

    def add_request(self, request: Request) -> None:
        self.request_queue.append(request)
        self.add_destination(request.from_floor)
        self.add_destination(request.to_floor)

    def should_stop_current_floor(self) -> bool:
        return self.current_floor in self.destination_floors

    def open_doors(self) -> None:
        self.doors_open = True
        self._emit("doors_opened")

        self.destination_floors.discard(self.current_floor)

        if self.current_floor > self.unload_floor_threshold:
            unloading = min(self.current_load, self.batch_size)
            self.current_load -= unloading
            self._emit("unloaded", count=unloading)

        if self.current_load < self.capacity and self.request_queue:
            loading = min(self.capacity - self.current_load, self.batch_size)
            self.current_load += loading
            self._emit("loaded", count=loading)

    def close_doors(self) -> None:
        self.doors_open = False
        self._emit("doors_closed")

    def update_direction(self) -> None:
        if not self.destination_floors:
            self.direction = Direction.IDLE
            return

        next_floor = self.next_destination()
        if next_floor > self.current_floor:
            self.direction = Direction.UP
        elif next_floor < self.current_floor:
            self.direction = Direction.DOWN
        else:
            self.direction = Direction.IDLE

    def next_destination(self) -> int:
        """Pick the floor to head for next.

        Keeps going up while there is a stop at or above the car, then takes
        the closest stop below it. With nothing else left it falls back to
        the lowest pending floor.
        """
        if not self.destination_floors:
            return self.current_floor

        floors = sorted(self.destination_floors)

        if self.direction in (Direction.UP, Direction.IDLE):
            for floor in floors:
                if floor >= self.current_floor:
                    return floor

        if self.direction in (Direction.DOWN, Direction.IDLE):
            below = [floor for floor in floors if floor <= self.current_floor]
            if below and below[-1] != self.current_floor:
                return below[-1]

        return floors[0]

    def move(self) -> None:
        if self.direction == Direction.IDLE:
            return
        self.current_floor += int(self.direction)
        self._emit("moved")

    def has_capacity(self) -> bool:
        return self.current_load < self.capacity

    def is_idle(self) -> bool:
        return self.direction == Direction.IDLE and not self.destination_floors

    def has_destination(self) -> bool:
        return bool(self.destination_floors)

    def destination_count(self) -> int:
        return len(self.destination_floors)

    def calculate_cost(self, request: Request) -> int:
        return calculate_cost(self.snapshot(), request.as_pending(), self.wrong_way_penalty)

    def snapshot(self) -> ElevatorSnapshot:
        return ElevatorSnapshot(
            elevator_id=self.elevator_id,
            floor=self.current_floor,
            direction=int(self.direction),
            load=self.current_load,
            capacity=self.capacity,
            destination_count=self.destination_count(),
            doors_open=self.doors_open,
        )

    def _emit(self, event: str, **details) -> None:
        payload = {"elevator_id": self.elevator_id, "floor": self.current_floor, **details}
        logger.debug("elevator %s %s %s", self.elevator_id, event, payload)
        if self.emit is not None:
            self.emit(event, payload)
