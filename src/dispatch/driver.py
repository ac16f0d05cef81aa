from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from .controller import ElevatorController, Submission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledRequest:
    """A request the driver submits once a given number of steps have run."""

    from_floor: int
    to_floor: int
    at_step: int = 0

    def __post_init__(self) -> None:
        if self.at_step < 0:
            raise ValueError(f"at_step must be non-negative, got {self.at_step}")

    @classmethod
    def from_dict(cls, data: Dict) -> "ScheduledRequest":
        return cls(
            from_floor=data["from_floor"],
            to_floor=data["to_floor"],
            at_step=data.get("at_step", 0),
        )


@dataclass
class RunResult:
    steps: int
    completed: bool
    submissions: List[Submission] = field(default_factory=list)
    final_state: dict = field(default_factory=dict)


def run_scenario(
    controller: ElevatorController,
    scheduled: Iterable[ScheduledRequest],
    max_steps: int = 50,
    on_step: Optional[Callable[[int, ElevatorController], None]] = None,
) -> RunResult:
    """Feed scheduled requests and step until quiescent or out of budget.

    Requests at step 0 go in before the first tick; a request at step ``n``
    goes in right after the ``n``-th tick.
    """
    if max_steps < 0:
        raise ValueError("max_steps must be non-negative")

    by_step: Dict[int, List[ScheduledRequest]] = {}
    for item in scheduled:
        by_step.setdefault(item.at_step, []).append(item)

    submissions: List[Submission] = []

    def submit_due(step: int) -> None:
        for item in by_step.pop(step, []):
            submissions.append(controller.submit_request(item.from_floor, item.to_floor))

    submit_due(0)
    step = 0
    while (not controller.is_quiescent() or by_step) and step < max_steps:
        step += 1
        controller.step()
        submit_due(step)
        if on_step is not None:
            on_step(step, controller)

    completed = controller.is_quiescent() and not by_step
    if completed:
        logger.info("All requests completed after %d steps", step)
    else:
        logger.warning("Run ended with pending work after %d steps", step)
    return RunResult(
        steps=step,
        completed=completed,
        submissions=submissions,
        final_state=controller.snapshot(),
    )
