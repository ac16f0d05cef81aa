from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, List, Optional, Tuple

from scheduler import WRONG_WAY_PENALTY, Scheduler, get_scheduler

from .config import BuildingConfig
from .elevator import Elevator
from .errors import InvalidFloorError, RejectionReason, RequestRejectedError
from .request import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Submission:
    """Outcome of submitting a request to the controller."""

    from_floor: int
    to_floor: int
    accepted: bool
    request: Optional[Request] = None
    elevator_id: Optional[int] = None
    reason: Optional[RejectionReason] = None

    @property
    def backlogged(self) -> bool:
        return self.accepted and self.elevator_id is None


class ElevatorController:
    """Owns the fleet and the backlog, and advances both one tick at a time."""

    def __init__(self, config: Optional[BuildingConfig] = None) -> None:
        self.config = config or BuildingConfig()
        self.scheduler: Scheduler = get_scheduler(
            self.config.scheduler_name, **self.config.scheduler_options
        )
        self.scheduler_name = self.config.scheduler_name
        self.event_hooks: Dict[str, List[Callable[[dict], None]]] = {}
        self.current_tick: int = 0
        self._pending_requests: Deque[Request] = deque()
        self._elevators: List[Elevator] = [
            Elevator(
                elevator_id=i + 1,
                capacity=self.config.capacity,
                current_floor=self.config.min_floor,
                batch_size=self.config.batch_size,
                unload_floor_threshold=self.config.unload_floor_threshold,
                emit=self._emit,
            )
            for i in range(self.config.elevator_count)
        ]
        self._apply_wrong_way_penalty()
        logger.info("Initialized ElevatorController with %d elevators", len(self._elevators))

    @property
    def min_floor(self) -> int:
        return self.config.min_floor

    @property
    def max_floor(self) -> int:
        return self.config.max_floor

    @property
    def elevators(self) -> List[Elevator]:
        return list(self._elevators)

    @property
    def backlog(self) -> Tuple[Request, ...]:
        return tuple(self._pending_requests)

    @property
    def pending_request_count(self) -> int:
        return len(self._pending_requests)

    def set_scheduler(self, name: str, **options) -> None:
        self.scheduler = get_scheduler(name, **options)
        self.scheduler_name = name
        self._apply_wrong_way_penalty()

    def on_event(self, event: str, callback: Callable[[dict], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def validate_request(self, from_floor: int, to_floor: int) -> Request:
        if not self.config.is_valid_floor(from_floor) or not self.config.is_valid_floor(to_floor):
            raise InvalidFloorError(from_floor, to_floor, self.min_floor, self.max_floor)
        return Request(from_floor, to_floor)

    def request_elevator(self, from_floor: int, to_floor: int) -> Submission:
        """Admit a request and assign it now, or park it in the backlog.

        Invalid requests are logged and reported through the returned
        ``Submission``; they never reach an elevator or the backlog.
        """
        try:
            request = self.validate_request(from_floor, to_floor)
        except RequestRejectedError as exc:
            logger.warning("%s", exc)
            self._emit(
                "request_rejected",
                {"from_floor": from_floor, "to_floor": to_floor, "reason": exc.reason.value},
            )
            return Submission(from_floor, to_floor, accepted=False, reason=exc.reason)

        logger.info("New request: Floor %d -> %d", from_floor, to_floor)
        elevator = self.find_best_elevator(request)
        if elevator is None:
            self._pending_requests.append(request)
            logger.info("Request queued - all elevators busy")
            self._emit("request_backlogged", {"from_floor": from_floor, "to_floor": to_floor})
            return Submission(from_floor, to_floor, accepted=True, request=request)

        elevator.add_request(request)
        logger.info("Assigned to Elevator %d", elevator.elevator_id)
        self._emit(
            "request_assigned",
            {"from_floor": from_floor, "to_floor": to_floor, "elevator_id": elevator.elevator_id},
        )
        return Submission(
            from_floor, to_floor, accepted=True, request=request, elevator_id=elevator.elevator_id
        )

    submit_request = request_elevator

    def find_best_elevator(self, request: Request) -> Optional[Elevator]:
        snapshots = [elevator.snapshot() for elevator in self._elevators]
        elevator_id = self.scheduler.select_elevator(snapshots, request.as_pending())
        if elevator_id is None:
            return None
        return self._get_elevator(elevator_id)

    def step(self) -> None:
        """Advance every elevator by one tick after retrying the backlog."""
        self._process_pending_requests()

        for elevator in self._elevators:
            if elevator.should_stop_current_floor():
                elevator.open_doors()
                elevator.close_doors()
            elevator.update_direction()
            elevator.move()

        self.current_tick += 1
        self._emit("step", {"tick": self.current_tick})

    def all_elevators_idle(self) -> bool:
        return all(elevator.is_idle() for elevator in self._elevators) and not self._pending_requests

    is_quiescent = all_elevators_idle

    def snapshot(self) -> dict:
        return {
            "tick": self.current_tick,
            "floors": [self.min_floor, self.max_floor],
            "scheduler": self.scheduler_name,
            "quiescent": self.all_elevators_idle(),
            "pending_requests": self.pending_request_count,
            "elevators": [
                {
                    "id": elevator.elevator_id,
                    "floor": elevator.current_floor,
                    "direction": elevator.direction.name,
                    "load": elevator.current_load,
                    "capacity": elevator.capacity,
                    "destinations": sorted(elevator.destination_floors),
                    "doors_open": elevator.doors_open,
                }
                for elevator in self._elevators
            ],
        }

    def _process_pending_requests(self) -> None:
        remaining: Deque[Request] = deque()
        while self._pending_requests:
            request = self._pending_requests.popleft()
            elevator = self.find_best_elevator(request)
            if elevator is None:
                remaining.append(request)
                continue
            elevator.add_request(request)
            logger.info("Assigned queued request to Elevator %d", elevator.elevator_id)
            self._emit(
                "backlog_assigned",
                {
                    "from_floor": request.from_floor,
                    "to_floor": request.to_floor,
                    "elevator_id": elevator.elevator_id,
                },
            )
        self._pending_requests = remaining

    def _apply_wrong_way_penalty(self) -> None:
        # Elevators score requests with the same penalty the scheduler ranks by.
        penalty = getattr(self.scheduler, "wrong_way_penalty", WRONG_WAY_PENALTY)
        for elevator in self._elevators:
            elevator.wrong_way_penalty = penalty

    def _emit(self, event: str, payload: dict) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)

    def _get_elevator(self, elevator_id: int) -> Optional[Elevator]:
        for elevator in self._elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        return None
