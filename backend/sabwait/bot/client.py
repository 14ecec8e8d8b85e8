"""Async HTTP client the chat frontend uses to reach the waitlist server."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger("sabwait.bot.client")


class ServerApiError(Exception):
    """The server answered with an error status."""

    def __init__(self, status_code: int, message: str, payload: dict[str, Any] | None = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload or {}


class ServerUnavailableError(Exception):
    """The server could not be reached at all."""


def describe_api_error(exc: Exception, fallback: str = "An error occurred") -> str:
    """Turn a client failure into a one-line chat message."""
    if isinstance(exc, ServerApiError):
        message = exc.message or fallback
        if exc.status_code == 404:
            return f"❌ Not found: {message}"
        if exc.status_code == 403:
            return f"❌ Access denied: {message}"
        if exc.status_code == 400:
            return f"❌ Bad request: {message}"
        if exc.status_code == 409:
            return f"❌ {message}"
        return f"❌ Error ({exc.status_code}): {message}"
    if isinstance(exc, ServerUnavailableError):
        return "❌ Cannot reach server. Is it online?"
    return f"❌ {str(exc) or fallback}"


class WaitlistServerClient:
    """Thin wrapper over the server's REST routes; one method per operation."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"X-API-Key": api_key} if api_key else {}
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, *, json: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ServerUnavailableError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if response.is_error:
            message = str(payload.get("message") or payload.get("error") or response.reason_phrase)
            raise ServerApiError(response.status_code, message, payload)
        return payload

    async def list_players(self) -> dict[str, Any]:
        return await self._request("GET", "/players/list")

    async def get_job_id(self) -> str:
        payload = await self._request("GET", "/getjobid")
        return str(payload["jobId"])

    async def list_waitlist(self) -> dict[str, Any]:
        return await self._request("GET", "/waitlist/list")

    async def get_entry(self, account_id: str) -> dict[str, Any]:
        payload = await self._request("GET", f"/waitlist/get/{account_id}")
        return payload["user"]

    async def admit(
        self,
        account_id: str,
        display_name: str,
        *,
        credit_paid: int,
        steals: int = 0,
    ) -> dict[str, Any]:
        payload = await self._request(
            "POST",
            "/waitlist/add",
            json={
                "discordId": account_id,
                "discordUsername": display_name,
                "brainrotPaid": credit_paid,
                "steals": steals,
            },
        )
        return payload["user"]

    async def credit_steals(self, account_id: str, amount: int) -> dict[str, Any]:
        payload = await self._request(
            "POST", "/waitlist/addsteals", json={"discordId": account_id, "amount": amount}
        )
        return payload["user"]

    async def consume_steals(self, account_id: str, amount: int = 1) -> tuple[bool, dict[str, Any]]:
        """Return ``(removed, user)``."""
        payload = await self._request(
            "POST", "/waitlist/usesteals", json={"discordId": account_id, "amount": amount}
        )
        return bool(payload["removed"]), payload["user"]

    async def reposition(self, account_id: str, new_position: int) -> tuple[dict[str, Any], int]:
        """Return ``(user, old_position)``."""
        payload = await self._request(
            "POST",
            "/waitlist/updateposition",
            json={"discordId": account_id, "newPosition": new_position},
        )
        return payload["user"], int(payload["oldPosition"])

    async def remove(self, account_id: str) -> dict[str, Any]:
        payload = await self._request("POST", "/waitlist/remove", json={"discordId": account_id})
        return payload["user"]

    async def add_exempt(self, username: str) -> str:
        payload = await self._request("POST", "/exempt/add", json={"username": username})
        return str(payload["username"])

    async def remove_exempt(self, username: str) -> tuple[str, bool]:
        payload = await self._request("POST", "/exempt/remove", json={"username": username})
        return str(payload["username"]), bool(payload["existed"])
