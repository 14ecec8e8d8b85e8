"""Exempt list REST tests."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_add_check_and_list(client: TestClient, auth_headers: dict[str, str]) -> None:
    """Input: add " PlayerOne " -> Output: normalized member visible to every read route."""
    added = client.post("/exempt/add", json={"username": " PlayerOne "}, headers=auth_headers)

    assert added.status_code == 200
    assert added.json() == {"success": True, "username": "playerone"}
    assert client.get("/exempt/check/PLAYERONE").json() == {"exempt": True, "username": "playerone"}
    assert client.get("/checkwhitelist", params={"username": "PlayerOne"}).json() == {
        "isWhitelisted": True,
        "username": "playerone",
    }
    assert client.get("/exempt/list").json() == {"users": ["playerone"], "count": 1}


def test_remove_is_idempotent(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.post("/exempt/add", json={"username": "playerone"}, headers=auth_headers)

    first = client.post("/exempt/remove", json={"username": "PlayerOne"}, headers=auth_headers)
    second = client.post("/exempt/remove", json={"username": "PlayerOne"}, headers=auth_headers)

    assert first.status_code == 200
    assert first.json()["existed"] is True
    assert second.status_code == 200
    assert second.json()["existed"] is False
    assert client.get("/exempt/check/playerone").json()["exempt"] is False


def test_mutations_require_secret(client: TestClient) -> None:
    assert client.post("/exempt/add", json={"username": "x"}).status_code == 403
    assert client.post("/exempt/remove", json={"username": "x"}).status_code == 403


def test_blank_usernames_are_rejected(client: TestClient, auth_headers: dict[str, str]) -> None:
    added = client.post("/exempt/add", json={"username": "   "}, headers=auth_headers)
    checked = client.get("/checkwhitelist")

    assert added.status_code == 400
    assert added.json()["code"] == "INVALID_ARGUMENT"
    assert checked.status_code == 400
