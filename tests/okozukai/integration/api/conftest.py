"""Pytest fixtures for API tests.

Each test gets its own SQLite file; the application's lifespan creates the
schema on startup, exactly as it does in production.
"""

import pytest
from fastapi.testclient import TestClient

from okozukai.presentation.api.app import API_V1_PREFIX, create_app
from okozukai.presentation.api.dependencies import clear_engine_cache
from okozukai_config.settings import clear_settings_cache


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def test_client(tmp_path, monkeypatch):
    """TestClient bound to a fresh SQLite database."""
    monkeypatch.setenv(
        "DATABASE_URL_OVERRIDE",
        f"sqlite+aiosqlite:///{tmp_path / 'api' / 'okozukai.db'}",
    )
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    monkeypatch.setenv("API_DEBUG", "true")
    clear_settings_cache()
    clear_engine_cache()

    with TestClient(create_app()) as client:
        yield client

    clear_engine_cache()
    clear_settings_cache()


@pytest.fixture
def create_journal(test_client, api_v1_prefix):
    """Create a journal through the API and return its JSON."""

    def _create(name: str = "Household", currency: str = "USD") -> dict:
        response = test_client.post(
            f"{api_v1_prefix}/journals",
            json={"name": name, "primary_currency": currency},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_tag(test_client, api_v1_prefix):
    """Create a tag through the API and return its JSON."""

    def _create(name: str) -> dict:
        response = test_client.post(f"{api_v1_prefix}/tags", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_transaction(test_client, api_v1_prefix):
    """Record a transaction through the API and return its JSON."""

    def _create(  # NOQA: PLR0913
        journal_id: str,
        type: str,
        amount: str,
        occurred_at: str,
        note: str | None = None,
        tag_ids: list[str] | None = None,
    ) -> dict:
        response = test_client.post(
            f"{api_v1_prefix}/transactions",
            json={
                "journal_id": journal_id,
                "type": type,
                "amount": amount,
                "occurred_at": occurred_at,
                "note": note,
                "tag_ids": tag_ids or [],
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
