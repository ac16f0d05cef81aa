from __future__ import annotations

from typing import Iterable, Optional

from .interface import ElevatorSnapshot, PendingRequest
from .utils import WRONG_WAY_PENALTY, calculate_cost


class LowestCostScheduler:
    """Picks the cheapest elevator with spare room, balancing ties by workload."""

    def __init__(self, wrong_way_penalty: int = WRONG_WAY_PENALTY) -> None:
        if wrong_way_penalty < 0:
            raise ValueError("wrong_way_penalty must be non-negative")
        self.wrong_way_penalty = wrong_way_penalty

    def cost(self, elevator: ElevatorSnapshot, request: PendingRequest) -> int:
        return calculate_cost(elevator, request, self.wrong_way_penalty)

    def select_elevator(
        self,
        elevator_state: Iterable[ElevatorSnapshot],
        request: PendingRequest,
    ) -> Optional[int]:
        best: Optional[ElevatorSnapshot] = None
        lowest_cost: Optional[int] = None
        for elevator in elevator_state:
            if elevator.available_capacity <= 0:
                continue
            cost = self.cost(elevator, request)
            if lowest_cost is None or cost < lowest_cost:
                best, lowest_cost = elevator, cost
            elif cost == lowest_cost and elevator.destination_count < best.destination_count:
                best = elevator
        return best.elevator_id if best is not None else None
