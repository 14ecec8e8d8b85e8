"""Waitlist REST contract tests: status codes, payload shapes and secret handling."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _admit(
    client: TestClient,
    headers: dict[str, str],
    discord_id: str,
    username: str,
    paid: int = 0,
    steals: int = 0,
):
    return client.post(
        "/waitlist/add",
        json={
            "discordId": discord_id,
            "discordUsername": username,
            "brainrotPaid": paid,
            "steals": steals,
        },
        headers=headers,
    )


def test_add_returns_entry_with_wire_shape(client: TestClient, auth_headers: dict[str, str]) -> None:
    """Input: POST /waitlist/add -> Output: 200 with position and full entry fields."""
    response = _admit(client, auth_headers, "u1", "Alice", paid=100, steals=5)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["position"] == 1
    user = body["user"]
    assert set(user) == {
        "discordId",
        "discordUsername",
        "position",
        "brainrotPaid",
        "steals",
        "addedAt",
        "status",
    }
    assert user["discordId"] == "u1"
    assert user["brainrotPaid"] == 100
    assert user["steals"] == 5
    assert user["status"] == "waiting"
    assert isinstance(user["addedAt"], int)


def test_add_accepts_numeric_discord_id(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        "/waitlist/add",
        json={"discordId": 123456789, "discordUsername": "Alice"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["user"]["discordId"] == "123456789"


def test_duplicate_add_is_conflict_with_existing_entry(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    _admit(client, auth_headers, "u1", "Alice", paid=100, steals=5)

    response = _admit(client, auth_headers, "u1", "Mallory", paid=1, steals=99)

    assert response.status_code == 409
    body = response.json()
    assert body["code"] == "ALREADY_EXISTS"
    assert body["message"] == "User already in waitlist"
    assert body["detail"]["user"]["discordUsername"] == "Alice"
    assert body["detail"]["user"]["steals"] == 5


def test_add_rejects_missing_fields(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post("/waitlist/add", json={"discordId": "u1"}, headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "INVALID_ARGUMENT"
    assert body["message"] == "discordUsername is required"
    assert body["detail"]["fields"] == ["discordUsername"]


def test_add_rejects_negative_steals(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = _admit(client, auth_headers, "u1", "Alice", steals=-1)

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_ARGUMENT"
    assert client.get("/waitlist/list").json()["totalCount"] == 0


def test_secret_is_required_for_mutations(client: TestClient) -> None:
    """Input: mutate without/with wrong secret -> Output: 403 UNAUTHORIZED, state unchanged."""
    missing = client.post("/waitlist/add", json={"discordId": "u1", "discordUsername": "Alice"})
    wrong = client.post(
        "/waitlist/add",
        json={"discordId": "u1", "discordUsername": "Alice"},
        headers={"X-API-Key": "nope"},
    )

    assert missing.status_code == 403
    assert missing.json()["code"] == "UNAUTHORIZED"
    assert wrong.status_code == 403
    assert client.get("/waitlist/list").json()["totalCount"] == 0


def test_secret_checked_before_body_validation(client: TestClient) -> None:
    response = client.post("/waitlist/add", json={})

    assert response.status_code == 403


def test_secret_accepted_from_body_query_or_header(client: TestClient, api_key: str) -> None:
    body_auth = client.post(
        "/waitlist/add",
        json={"discordId": "u1", "discordUsername": "A", "apiKey": api_key},
    )
    query_auth = client.post(
        f"/waitlist/add?apiKey={api_key}",
        json={"discordId": "u2", "discordUsername": "B"},
    )
    header_auth = client.post(
        "/waitlist/add",
        json={"discordId": "u3", "discordUsername": "C"},
        headers={"X-API-Key": api_key},
    )

    assert [body_auth.status_code, query_auth.status_code, header_auth.status_code] == [200, 200, 200]
    assert client.get("/waitlist/list").json()["totalCount"] == 3


def test_open_mode_skips_secret(open_client: TestClient) -> None:
    response = open_client.post("/waitlist/add", json={"discordId": "u1", "discordUsername": "Alice"})

    assert response.status_code == 200


def test_usesteals_needs_no_secret_and_evicts_at_zero(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    """Input: steals=2, usesteals amount=5 -> Output: removed=true, steals 0, then 404 on get."""
    _admit(client, auth_headers, "u1", "Alice", steals=2)

    response = client.post("/waitlist/usesteals", json={"discordId": "u1", "amount": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["removed"] is True
    assert body["user"]["steals"] == 0
    missing = client.get("/waitlist/get/u1")
    assert missing.status_code == 404
    assert missing.json()["message"] == "User not in waitlist"


def test_usesteals_defaults_to_one(client: TestClient, auth_headers: dict[str, str]) -> None:
    _admit(client, auth_headers, "u1", "Alice", steals=3)

    response = client.post("/waitlist/usesteals", json={"discordId": "u1"})

    assert response.json()["removed"] is False
    assert response.json()["user"]["steals"] == 2


def test_usesteals_zero_amount_spends_one(client: TestClient, auth_headers: dict[str, str]) -> None:
    _admit(client, auth_headers, "u1", "Alice", steals=3)

    response = client.post("/waitlist/usesteals", json={"discordId": "u1", "amount": 0})

    assert response.status_code == 200
    assert response.json()["removed"] is False
    assert response.json()["user"]["steals"] == 2


def test_usesteals_rejects_negative_amount(client: TestClient, auth_headers: dict[str, str]) -> None:
    _admit(client, auth_headers, "u1", "Alice", steals=3)

    response = client.post("/waitlist/usesteals", json={"discordId": "u1", "amount": -1})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_ARGUMENT"
    assert client.get("/waitlist/get/u1").json()["user"]["steals"] == 3


def test_padded_discord_id_matches_trimmed_entry(client: TestClient, auth_headers: dict[str, str]) -> None:
    """Input: admit " u1 ", usesteals " u1 " -> Output: same entry, stored as "u1"."""
    admitted = _admit(client, auth_headers, " u1 ", "Alice", steals=3)

    response = client.post("/waitlist/usesteals", json={"discordId": " u1 "})

    assert admitted.json()["user"]["discordId"] == "u1"
    assert response.status_code == 200
    assert response.json()["user"]["steals"] == 2


def test_addsteals_credits_and_validates(client: TestClient, auth_headers: dict[str, str]) -> None:
    _admit(client, auth_headers, "u1", "Alice", steals=5)

    ok = client.post("/waitlist/addsteals", json={"discordId": "u1", "amount": 3}, headers=auth_headers)
    bad = client.post("/waitlist/addsteals", json={"discordId": "u1", "amount": 0}, headers=auth_headers)
    missing = client.post("/waitlist/addsteals", json={"discordId": "ghost", "amount": 1}, headers=auth_headers)

    assert ok.status_code == 200
    assert ok.json()["user"]["steals"] == 8
    assert ok.json()["user"]["position"] == 1
    assert bad.status_code == 400
    assert missing.status_code == 404
    assert missing.json()["detail"] == {"discordId": "ghost"}


def test_updateposition_moves_entry_between_partitions(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    _admit(client, auth_headers, "u1", "Alice", steals=1)

    response = client.post(
        "/waitlist/updateposition",
        json={"discordId": "u1", "newPosition": 4},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["oldPosition"] == 1
    assert response.json()["user"]["status"] == "active"
    listing = client.get("/waitlist/list").json()
    assert listing["activeCount"] == 1
    assert listing["waitingCount"] == 0

    negative = client.post(
        "/waitlist/updateposition",
        json={"discordId": "u1", "newPosition": -1},
        headers=auth_headers,
    )
    assert negative.status_code == 400


def test_remove_then_remove_again_is_not_found(client: TestClient, auth_headers: dict[str, str]) -> None:
    _admit(client, auth_headers, "u1", "Alice")

    first = client.post("/waitlist/remove", json={"discordId": "u1"}, headers=auth_headers)
    second = client.post("/waitlist/remove", json={"discordId": "u1"}, headers=auth_headers)

    assert first.status_code == 200
    assert first.json()["user"]["discordId"] == "u1"
    assert second.status_code == 404
    assert second.json()["code"] == "NOT_FOUND"


def test_list_partitions_and_counts(client: TestClient, auth_headers: dict[str, str]) -> None:
    for idx in range(1, 5):
        _admit(client, auth_headers, f"u{idx}", f"user{idx}", steals=1)

    listing = client.get("/waitlist/list").json()

    assert [entry["position"] for entry in listing["all"]] == [1, 2, 3, 4]
    assert [entry["discordId"] for entry in listing["active"]] == ["u2", "u3", "u4"]
    assert [entry["discordId"] for entry in listing["waiting"]] == ["u1"]
    assert (listing["totalCount"], listing["activeCount"], listing["waitingCount"]) == (4, 3, 1)
