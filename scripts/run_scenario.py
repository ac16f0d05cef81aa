"""CLI for replaying LiftDispatch request scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from dispatch import BuildingConfig, ElevatorController, ScheduledRequest, run_scenario


def build_controller(config: Dict) -> ElevatorController:
    building_cfg = dict(config.get("building", {}))
    scheduler_cfg = config.get("scheduler", {})
    if scheduler_cfg:
        building_cfg.setdefault("scheduler_name", scheduler_cfg.get("name", "lowest_cost"))
        building_cfg.setdefault("scheduler_options", scheduler_cfg.get("options", {}))
    return ElevatorController(BuildingConfig.from_dict(building_cfg))


def load_requests(config: Dict) -> List[ScheduledRequest]:
    return [ScheduledRequest.from_dict(item) for item in config.get("requests", [])]


def print_status(controller: ElevatorController) -> None:
    state = controller.snapshot()
    print("=" * 60)
    print(f"ELEVATOR SYSTEM STATUS (tick {state['tick']})")
    print("=" * 60)
    for elevator in state["elevators"]:
        print(
            f"Elevator {elevator['id']}: floor={elevator['floor']} "
            f"direction={elevator['direction']} load={elevator['load']}/{elevator['capacity']} "
            f"destinations={elevator['destinations']}"
        )
    if state["pending_requests"]:
        print(f"Pending requests: {state['pending_requests']}")
    print("=" * 60)


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the run summary as JSON",
    )
    parser.add_argument("--status-interval", type=int, default=5, help="Print status every N steps")
    parser.add_argument("--log-level", default="INFO", help="Logging level for the dispatch engine")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")

    config = json.loads(args.config.read_text())
    controller = build_controller(config)
    requests = load_requests(config)
    max_steps = config.get("max_steps", 50)

    def on_step(step: int, ctl: ElevatorController) -> None:
        if args.status_interval > 0 and step % args.status_interval == 0:
            print_status(ctl)

    print_status(controller)
    result = run_scenario(controller, requests, max_steps=max_steps, on_step=on_step)

    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "max_steps": max_steps,
        "steps": result.steps,
        "completed": result.completed,
        "rejected": [
            {"from_floor": s.from_floor, "to_floor": s.to_floor, "reason": s.reason.value}
            for s in result.submissions
            if not s.accepted
        ],
        "final_state": result.final_state,
    }
    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print_status(controller)
    print(f"Total steps: {result.steps}")
    if result.completed:
        print("All requests completed successfully!")
    else:
        print("Simulation ended with pending work (max steps reached)")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
