"""Eligibility endpoint tests (in-memory repositories)."""

from datetime import date

from httpx import AsyncClient


async def test_ineligible_is_200_with_reasons(client: AsyncClient, store, login, readonly_a) -> None:
    store.add_person("kid", birth_date=date(2019, 1, 1))
    store.representatives["kid"] = 1
    response = await client.post(
        "/api/v1/eligibility/check",
        json={"person_id": "kid", "level_id": "L1"},
        headers=login(readonly_a),
    )
    assert response.status_code == 200
    data = response.json()
    assert data["eligible"] is False
    assert data["hard_failures"] == ["AGE_FLOOR"]
    assert data["soft_warnings"] == []


async def test_strict_path_treats_sequence_as_hard(client: AsyncClient, store, login, readonly_a) -> None:
    store.add_person("p1")
    response = await client.post(
        "/api/v1/eligibility/check",
        json={"person_id": "p1", "level_id": "L3"},
        headers=login(readonly_a),
    )
    assert "LEVEL_SEQUENCE_INCOMPLETE" in response.json()["hard_failures"]


async def test_unknown_person_is_404(client: AsyncClient, login, readonly_a) -> None:
    response = await client.post(
        "/api/v1/eligibility/check",
        json={"person_id": "ghost", "level_id": "L1"},
        headers=login(readonly_a),
    )
    assert response.status_code == 404
    assert response.json()["error"] == "PERSON_NOT_FOUND"
