from __future__ import annotations

import asyncio
import contextlib
import json
from typing import Optional, Sequence, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from dispatch import BuildingConfig, ElevatorController


class SchedulerSelection(BaseModel):
    name: str = "lowest_cost"
    wrong_way_penalty: Optional[int] = Field(default=None, ge=0)


class RideRequest(BaseModel):
    from_floor: int
    to_floor: int


class StepRequest(BaseModel):
    count: int = Field(default=1, ge=1, le=1000)


class DispatchManager:
    """Serializes access to one controller and fans updates out to websocket watchers."""

    def __init__(self, config: Optional[BuildingConfig] = None) -> None:
        self.controller = ElevatorController(config)
        self.watchers: Set[WebSocket] = set()
        self._lock = asyncio.Lock()

    async def publish(self, event: str, state: dict) -> None:
        message = json.dumps({"event": event, **state})
        dropped: Set[WebSocket] = set()
        for watcher in set(self.watchers):
            try:
                await watcher.send_text(message)
            except WebSocketDisconnect:
                dropped.add(watcher)
        for watcher in dropped:
            await self.unwatch(watcher)

    async def watch(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.watchers.add(websocket)
        await websocket.send_text(json.dumps({"event": "connected", **self.current_state()}))

    async def unwatch(self, websocket: WebSocket) -> None:
        self.watchers.discard(websocket)
        with contextlib.suppress(RuntimeError):
            await websocket.close()

    def current_state(self) -> dict:
        return self.controller.snapshot()

    async def submit(self, from_floor: int, to_floor: int) -> dict:
        async with self._lock:
            submission = self.controller.submit_request(from_floor, to_floor)
            state = self.current_state()
        if not submission.accepted:
            raise HTTPException(status_code=400, detail=submission.reason.value)
        state["elevator_id"] = submission.elevator_id
        state["backlogged"] = submission.backlogged
        await self.publish("request_backlogged" if submission.backlogged else "request_assigned", state)
        return state

    async def step(self, count: int) -> dict:
        async with self._lock:
            for _ in range(count):
                self.controller.step()
            state = self.current_state()
        await self.publish("step", state)
        return state

    async def set_scheduler(self, selection: SchedulerSelection) -> dict:
        options = {}
        if selection.wrong_way_penalty is not None:
            options["wrong_way_penalty"] = selection.wrong_way_penalty
        async with self._lock:
            self.controller.set_scheduler(selection.name, **options)
            state = self.current_state()
        await self.publish("scheduler_changed", state)
        return state


def create_app(
    manager: Optional[DispatchManager] = None,
    allowed_origins: Sequence[str] = ("*",),
) -> FastAPI:
    manager = manager or DispatchManager()
    app = FastAPI(title="LiftDispatch API")
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins),
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )

    @app.get("/state")
    async def get_state() -> dict:
        return manager.current_state()

    @app.post("/requests")
    async def submit_request(request: RideRequest) -> dict:
        return await manager.submit(request.from_floor, request.to_floor)

    @app.post("/step")
    async def step(request: StepRequest) -> dict:
        return await manager.step(request.count)

    @app.put("/scheduler")
    async def select_scheduler(selection: SchedulerSelection) -> dict:
        try:
            return await manager.set_scheduler(selection)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

    @app.websocket("/ws/stream")
    async def stream(websocket: WebSocket) -> None:
        await manager.watch(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            await manager.unwatch(websocket)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
