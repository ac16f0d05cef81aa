from __future__ import annotations

from .interface import ElevatorSnapshot, PendingRequest

WRONG_WAY_PENALTY = 10


def is_on_the_way(elevator: ElevatorSnapshot, request: PendingRequest) -> bool:
    """True when the elevator travels the request's way and has not passed its origin."""

    if elevator.direction == 0 or elevator.direction != request.direction:
        return False
    if elevator.direction > 0:
        return request.origin >= elevator.floor
    return request.origin <= elevator.floor


def calculate_cost(
    elevator: ElevatorSnapshot,
    request: PendingRequest,
    wrong_way_penalty: int = WRONG_WAY_PENALTY,
) -> int:
    """Score an elevator against a request, lower is better.

    Idle elevators and elevators already heading past the origin pay the
    plain distance. Anything else has to finish its current run first and
    is charged a flat penalty on top of the distance.
    """

    distance = abs(elevator.floor - request.origin)
    if elevator.direction == 0:
        return distance
    if is_on_the_way(elevator, request):
        return distance
    return distance + wrong_way_penalty
