"""Shared fixtures for waitlist server and bot tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sabwait.core.config import Settings
from sabwait.main import create_app

TEST_API_KEY = "test-shared-secret"


@pytest.fixture
def settings() -> Settings:
    """Server settings with the shared secret configured."""
    return Settings(sab_api_key=TEST_API_KEY)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def open_client() -> Iterator[TestClient]:
    """Client for an app with no shared secret configured (open mode)."""
    with TestClient(create_app(Settings(sab_api_key=None))) as test_client:
        yield test_client


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-API-Key": TEST_API_KEY}
