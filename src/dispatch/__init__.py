"""Elevator dispatch engine for LiftDispatch."""

from .config import BuildingConfig
from .controller import ElevatorController, Submission
from .driver import RunResult, ScheduledRequest, run_scenario
from .elevator import Elevator
from .errors import DegenerateRequestError, InvalidFloorError, RejectionReason, RequestRejectedError
from .request import Direction, Request

__all__ = [
    "BuildingConfig",
    "DegenerateRequestError",
    "Direction",
    "Elevator",
    "ElevatorController",
    "InvalidFloorError",
    "RejectionReason",
    "Request",
    "RequestRejectedError",
    "RunResult",
    "ScheduledRequest",
    "Submission",
    "run_scenario",
]
