"""Smoke tests for health and app wiring."""

import pytest
from httpx import AsyncClient

from catechesis.domain.exceptions import SqlNotConfiguredException
from catechesis.infrastructure.persistence import database


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})
    assert response.headers["X-Request-ID"] != "bad id!"
    assert len(response.headers["X-Request-ID"]) == 36


async def test_ready_returns_503_without_database(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def no_db():
        raise SqlNotConfiguredException()
        yield

    monkeypatch.setattr(database, "get_db", no_db)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


async def test_ready_returns_ok_when_select_succeeds(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    class _Session:
        async def execute(self, statement):
            return None

    async def fake_db():
        yield _Session()

    monkeypatch.setattr(database, "get_db", fake_db)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
