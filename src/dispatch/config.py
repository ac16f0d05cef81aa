from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping


@dataclass
class BuildingConfig:
    """Floor range, fleet shape and exchange rules for one controller."""

    min_floor: int = 1
    max_floor: int = 10
    elevator_count: int = 3
    capacity: int = 8
    batch_size: int = 2
    # Passengers only step off above this floor.
    unload_floor_threshold: int = 0
    scheduler_name: str = "lowest_cost"
    scheduler_options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.min_floor > self.max_floor:
            raise ValueError(f"min_floor {self.min_floor} is above max_floor {self.max_floor}")
        if self.elevator_count < 0:
            raise ValueError("elevator_count must be non-negative")
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")

    def is_valid_floor(self, floor: int) -> bool:
        return self.min_floor <= floor <= self.max_floor

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BuildingConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown building settings: {', '.join(sorted(unknown))}")
        return cls(**dict(data))
