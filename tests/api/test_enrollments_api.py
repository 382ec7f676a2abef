"""Enrollment endpoint tests (in-memory repositories)."""

from datetime import date

from httpx import AsyncClient


async def test_create_enrollment_201(client: AsyncClient, store, login, secretary_a) -> None:
    store.add_person("p1")
    response = await client.post(
        "/api/v1/enrollments",
        json={"person_id": "p1", "group_id": "G-A"},
        headers=login(secretary_a),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["tenant_id"] == "parish-a"
    assert data["paid"] is False


async def test_create_duplicate_409(client: AsyncClient, store, login, secretary_a) -> None:
    store.add_person("p1")
    store.add_enrollment("e1", "p1", "G-A")
    response = await client.post(
        "/api/v1/enrollments",
        json={"person_id": "p1", "group_id": "G-A"},
        headers=login(secretary_a),
    )
    assert response.status_code == 409
    assert response.json()["error"] == "ENROLLMENT_ALREADY_EXISTS"


async def test_create_in_foreign_parish_403(client: AsyncClient, store, login, secretary_b) -> None:
    store.add_person("p1")
    response = await client.post(
        "/api/v1/enrollments",
        json={"person_id": "p1", "group_id": "G-A"},
        headers=login(secretary_b),
    )
    assert response.status_code == 403
    assert response.json() == {
        "error": "PERMISSION_DENIED",
        "message": "Permission denied: enrollment:create",
        "details": {"reason": "CROSS_TENANT", "capability": "enrollment:create"},
    }


async def test_parish_mismatch_400(client: AsyncClient, store, login, admin) -> None:
    store.add_person("p1")
    response = await client.post(
        "/api/v1/enrollments",
        json={"person_id": "p1", "group_id": "G-A", "tenant_id": "parish-b"},
        headers=login(admin),
    )
    assert response.status_code == 400
    assert response.json()["error"] == "GROUP_TENANT_MISMATCH"


async def test_assisted_clean_is_201(client: AsyncClient, store, login, secretary_a) -> None:
    store.add_person("p1")
    store.certificates["p1"] = {1}
    store.baptisms.add("p1")
    store.representatives["p1"] = 1
    response = await client.post(
        "/api/v1/enrollments/assisted",
        json={"person_id": "p1", "group_id": "G-A"},
        headers=login(secretary_a),
    )
    assert response.status_code == 201
    assert response.json()["warnings"] == []


async def test_assisted_with_warnings_is_200(client: AsyncClient, store, login, secretary_a) -> None:
    store.add_person("p1")
    response = await client.post(
        "/api/v1/enrollments/assisted",
        json={"person_id": "p1", "group_id": "G-A"},
        headers=login(secretary_a),
    )
    assert response.status_code == 200
    data = response.json()
    assert "LEVEL_SEQUENCE_INCOMPLETE" in data["warnings"]
    assert data["enrollment"]["group_id"] == "G-A"


async def test_assisted_hard_failure_400(client: AsyncClient, store, login, secretary_a) -> None:
    store.add_person("kid", birth_date=date(2019, 1, 1))
    response = await client.post(
        "/api/v1/enrollments/assisted",
        json={"person_id": "kid", "group_id": "G-A"},
        headers=login(secretary_a),
    )
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "ELIGIBILITY_REQUIREMENTS_NOT_MET"
    assert data["details"]["hard_failures"] == ["AGE_FLOOR"]
    assert store.enrollments == {}


async def test_payment_transfer_and_delete(
    client: AsyncClient, store, login, secretary_a, parish_admin_a
) -> None:
    store.add_person("p1")
    store.add_enrollment("e1", "p1", "G-A")
    headers = login(secretary_a)

    response = await client.patch(
        "/api/v1/enrollments/e1/payment", json={"paid": True}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["paid"] is True

    response = await client.post(
        "/api/v1/enrollments/e1/transfer",
        json={"to_group_id": "G-A2", "reason": "schedule"},
        headers=headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["enrollment"]["group_id"] == "G-A2"
    assert data["from_group_id"] == "G-A"
    assert data["reason"] == "schedule"

    response = await client.delete("/api/v1/enrollments/e1", headers=headers)
    assert response.status_code == 403
    response = await client.delete("/api/v1/enrollments/e1", headers=login(parish_admin_a))
    assert response.status_code == 204
    assert store.enrollments == {}


async def test_missing_body_field_422(client: AsyncClient, login, secretary_a) -> None:
    response = await client.post(
        "/api/v1/enrollments", json={"person_id": "p1"}, headers=login(secretary_a)
    )
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_missing_and_foreign_enrollment_look_the_same(
    client: AsyncClient, store, login, admin, secretary_b
) -> None:
    store.add_person("p1")
    store.add_enrollment("e1", "p1", "G-A")
    headers = login(secretary_b)
    bodies = []
    for enrollment_id in ("e1", "no-such-enrollment"):
        response = await client.patch(
            f"/api/v1/enrollments/{enrollment_id}/payment", json={"paid": True}, headers=headers
        )
        assert response.status_code == 403
        bodies.append(response.json())
    assert bodies[0] == bodies[1]
    assert bodies[0]["details"]["reason"] == "CROSS_TENANT"

    response = await client.patch(
        "/api/v1/enrollments/no-such-enrollment/payment", json={"paid": True}, headers=login(admin)
    )
    assert response.status_code == 404
