from __future__ import annotations

from typing import Dict, Type

from .interface import ElevatorSnapshot, PendingRequest, Scheduler
from .lowest_cost import LowestCostScheduler
from .utils import WRONG_WAY_PENALTY, calculate_cost

__all__ = [
    "ElevatorSnapshot",
    "LowestCostScheduler",
    "PendingRequest",
    "Scheduler",
    "WRONG_WAY_PENALTY",
    "calculate_cost",
    "get_scheduler",
]


SCHEDULER_REGISTRY: Dict[str, Type[Scheduler]] = {
    "lowest_cost": LowestCostScheduler,
}


def get_scheduler(name: str, **kwargs) -> Scheduler:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(**kwargs)
