"""Status websocket tests: initial snapshot, push updates and heartbeat replies."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_connect_receives_status_snapshot_first(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.post("/update", json={"jobId": "job-1"})
    client.post("/waitlist/add", json={"discordId": "u1", "discordUsername": "A"}, headers=auth_headers)

    with client.websocket_connect("/ws/status") as websocket:
        message = websocket.receive_json()

    assert message["v"] == 1
    assert message["type"] == "STATUS"
    payload = message["payload"]
    assert payload["jobId"] == "job-1"
    assert payload["waitlistCount"] == 1
    assert payload["waitlist"]["totalCount"] == 1
    assert payload["players"] == []
    assert payload["apiKeyConfigured"] is True


def test_job_update_is_pushed(client: TestClient) -> None:
    with client.websocket_connect("/ws/status") as websocket:
        websocket.receive_json()
        client.post("/update", json={"jobId": "job-2"})
        message = websocket.receive_json()

    assert message["type"] == "JOB_UPDATE"
    assert message["payload"] == {"jobId": "job-2"}


def test_waitlist_update_is_pushed(client: TestClient, auth_headers: dict[str, str]) -> None:
    with client.websocket_connect("/ws/status") as websocket:
        websocket.receive_json()
        client.post("/waitlist/add", json={"discordId": "u1", "discordUsername": "A"}, headers=auth_headers)
        message = websocket.receive_json()

    assert message["type"] == "WAITLIST_UPDATE"
    assert message["payload"]["totalCount"] == 1
    assert message["payload"]["all"][0]["discordId"] == "u1"


def test_players_update_is_pushed(client: TestClient) -> None:
    with client.websocket_connect("/ws/status") as websocket:
        websocket.receive_json()
        client.post("/player/join", json={"username": "builder"})
        message = websocket.receive_json()

    assert message["type"] == "PLAYERS_UPDATE"
    assert message["payload"]["count"] == 1


def test_client_ping_gets_pong(client: TestClient) -> None:
    with client.websocket_connect("/ws/status") as websocket:
        websocket.receive_json()
        websocket.send_text("PING")
        message = websocket.receive_json()

    assert message["type"] == "PONG"


def test_disconnect_unregisters_listener(client: TestClient) -> None:
    with client.websocket_connect("/ws/status") as websocket:
        websocket.receive_json()
        assert len(client.app.state.runtime.status_connections) == 1

    client.post("/update", json={"jobId": "job-3"})
    assert client.get("/getjobid").json() == {"jobId": "job-3"}
