"""User administration endpoint tests (in-memory repositories)."""

from httpx import AsyncClient

from catechesis.domain.enums import Role


async def test_admin_creates_and_reads_user(client: AsyncClient, login, admin) -> None:
    headers = login(admin)
    response = await client.post(
        "/api/v1/users",
        json={"username": "maria", "role": "catechist", "tenant_id": "parish-a"},
        headers=headers,
    )
    assert response.status_code == 201
    user = response.json()
    assert user["role"] == "catechist"

    response = await client.get(f"/api/v1/users/{user['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json()["username"] == "maria"


async def test_non_admin_without_parish_400(client: AsyncClient, login, admin) -> None:
    response = await client.post(
        "/api/v1/users", json={"username": "x", "role": "secretary"}, headers=login(admin)
    )
    assert response.status_code == 400
    assert response.json()["error"] == "PARISH_REQUIRED"


async def test_unknown_role_422(client: AsyncClient, login, admin) -> None:
    response = await client.post(
        "/api/v1/users",
        json={"username": "x", "role": "pope", "tenant_id": "parish-a"},
        headers=login(admin),
    )
    assert response.status_code == 422


async def test_self_deactivation_403(client: AsyncClient, login, admin) -> None:
    response = await client.post(f"/api/v1/users/{admin.user_id}/deactivate", headers=login(admin))
    assert response.status_code == 403
    assert response.json()["details"]["reason"] == "SELF_ACTION"


async def test_role_change_and_deactivation(client: AsyncClient, store, login, admin) -> None:
    store.add_user("cat-a", Role.CATECHIST, "parish-a")
    headers = login(admin)
    response = await client.patch(
        "/api/v1/users/cat-a/role",
        json={"role": "parish_admin", "tenant_id": "parish-a"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["role"] == "parish_admin"

    response = await client.post("/api/v1/users/cat-a/deactivate", headers=headers)
    assert response.status_code == 200
    assert response.json()["is_active"] is False
