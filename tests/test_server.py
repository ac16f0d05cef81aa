"""Tests for the HTTP and websocket surface."""

import pytest
from fastapi.testclient import TestClient

from dispatch import BuildingConfig
from server.app import DispatchManager, create_app


@pytest.fixture
def client():
    manager = DispatchManager(BuildingConfig(min_floor=1, max_floor=10, elevator_count=1))
    with TestClient(create_app(manager)) as test_client:
        yield test_client


def test_initial_state(client):
    response = client.get("/state")
    assert response.status_code == 200
    body = response.json()
    assert body["tick"] == 0
    assert body["quiescent"] is True
    assert len(body["elevators"]) == 1


def test_submit_and_step(client):
    response = client.post("/requests", json={"from_floor": 1, "to_floor": 7})
    assert response.status_code == 200
    assert response.json()["elevator_id"] == 1
    assert response.json()["backlogged"] is False

    response = client.post("/step", json={"count": 6})
    assert response.status_code == 200
    body = response.json()
    assert body["tick"] == 6
    assert body["elevators"][0]["floor"] == 7
    assert body["elevators"][0]["direction"] == "UP"

    body = client.post("/step", json={}).json()
    assert body["quiescent"] is True


@pytest.mark.parametrize(
    "payload, reason",
    [
        ({"from_floor": 0, "to_floor": 3}, "invalid-floor"),
        ({"from_floor": 4, "to_floor": 4}, "same-floor"),
    ],
)
def test_rejected_request(client, payload, reason):
    response = client.post("/requests", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == reason
    assert client.get("/state").json()["pending_requests"] == 0


def test_step_count_must_be_positive(client):
    assert client.post("/step", json={"count": 0}).status_code == 422


def test_select_scheduler(client):
    response = client.put("/scheduler", json={"name": "lowest_cost", "wrong_way_penalty": 4})
    assert response.status_code == 200
    assert response.json()["scheduler"] == "lowest_cost"
    assert client.app.state.manager.controller.elevators[0].wrong_way_penalty == 4

    assert client.put("/scheduler", json={"name": "nope"}).status_code == 400
    assert client.put("/scheduler", json={"wrong_way_penalty": -1}).status_code == 422


def test_websocket_sends_current_state(client):
    with client.websocket_connect("/ws/stream") as websocket:
        state = websocket.receive_json()
    assert state["event"] == "connected"
    assert state["tick"] == 0
    assert state["elevators"][0]["floor"] == 1


def test_websocket_publishes_dispatch_updates(client):
    with client.websocket_connect("/ws/stream") as websocket:
        websocket.receive_json()

        client.post("/requests", json={"from_floor": 2, "to_floor": 5})
        assigned = websocket.receive_json()
        assert assigned["event"] == "request_assigned"
        assert assigned["elevator_id"] == 1
        assert assigned["elevators"][0]["destinations"] == [2, 5]

        client.post("/step", json={"count": 1})
        stepped = websocket.receive_json()
        assert stepped["event"] == "step"
        assert stepped["tick"] == 1
