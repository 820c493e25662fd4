import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_add_role_is_idempotent(client: AsyncClient, admin, alice):
    """Grant Role

    Given alice holds only USER
    When an admin grants MANAGER twice
    Then both requests succeed
    And alice holds exactly USER and MANAGER
    """
    first = await client.post(f"/users/{alice['id']}/roles", params={"role": "MANAGER"}, headers=admin["headers"])
    second = await client.post(f"/users/{alice['id']}/roles", params={"role": "MANAGER"}, headers=admin["headers"])

    assert first.status_code == 200
    assert second.status_code == 200
    assert sorted(second.json()["roles"]) == ["MANAGER", "USER"]


@pytest.mark.asyncio
async def test_remove_role_is_idempotent(client: AsyncClient, admin, alice):
    first = await client.delete(f"/users/{alice['id']}/roles", params={"role": "USER"}, headers=admin["headers"])
    second = await client.delete(f"/users/{alice['id']}/roles", params={"role": "USER"}, headers=admin["headers"])

    assert first.status_code == 200
    assert first.json()["roles"] == []
    assert second.status_code == 200
    assert second.json()["roles"] == []


@pytest.mark.asyncio
async def test_granted_admin_role_applies_to_existing_token(client: AsyncClient, admin, alice):
    """Roles are read per request, so a token issued before the grant gains admin access"""
    before = await client.get("/users", headers=alice["headers"])
    await client.post(f"/users/{alice['id']}/roles", params={"role": "ADMIN"}, headers=admin["headers"])
    after = await client.get("/users", headers=alice["headers"])

    assert before.status_code == 403
    assert after.status_code == 200


@pytest.mark.asyncio
async def test_revoked_admin_role_applies_to_existing_token(client: AsyncClient, admin):
    response = await client.delete(f"/users/{admin['id']}/roles", params={"role": "ADMIN"}, headers=admin["headers"])
    assert response.status_code == 200

    response = await client.get("/users", headers=admin["headers"])

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_blank_role_is_rejected(client: AsyncClient, admin, alice):
    response = await client.post(f"/users/{alice['id']}/roles", params={"role": "  "}, headers=admin["headers"])

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_role_change_for_missing_user(client: AsyncClient, admin):
    response = await client.post("/users/9999/roles", params={"role": "MANAGER"}, headers=admin["headers"])

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_role_change_requires_admin(client: AsyncClient, alice):
    response = await client.post(f"/users/{alice['id']}/roles", params={"role": "ADMIN"}, headers=alice["headers"])

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "ACCESS_DENIED"


@pytest.mark.asyncio
async def test_role_change_requires_token(client: AsyncClient, alice):
    response = await client.post(f"/users/{alice['id']}/roles", params={"role": "ADMIN"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_status(client: AsyncClient, admin, alice):
    """Status Change

    Given alice is ACTIVE
    When an admin sets her status to SUSPENDED
    Then the projection reports SUSPENDED
    """
    response = await client.patch(
        f"/users/{alice['id']}/status", params={"status": "SUSPENDED"}, headers=admin["headers"]
    )

    assert response.status_code == 200
    assert response.json()["status"] == "SUSPENDED"


@pytest.mark.asyncio
async def test_invalid_status(client: AsyncClient, admin, alice):
    response = await client.patch(
        f"/users/{alice['id']}/status", params={"status": "BANNED"}, headers=admin["headers"]
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == (
        "Invalid value: BANNED. Must be one of: ACTIVE, INACTIVE, SUSPENDED, PENDING"
    )


@pytest.mark.asyncio
async def test_status_change_requires_admin(client: AsyncClient, alice):
    response = await client.patch(
        f"/users/{alice['id']}/status", params={"status": "ACTIVE"}, headers=alice["headers"]
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_alice_walkthrough(client: AsyncClient, admin, test_data):
    """Register, log in, fail a login, then grant ADMIN and drop USER"""
    registered = await client.post("/users/register", json=test_data.get_copy("alice_registration"))
    assert registered.status_code == 201
    alice = registered.json()
    assert alice["roles"] == ["USER"]
    assert alice["status"] == "ACTIVE"
    assert alice["user_type"] == "EXTERNAL"

    login = await client.post("/users/login", json={"username_or_email": "alice", "password": "pw1234567"})
    assert login.status_code == 200
    assert login.json()["token"]
    assert login.json()["user"]["username"] == "alice"

    failed = await client.post("/users/login", json={"username_or_email": "alice", "password": "wrong"})
    assert failed.status_code == 401

    granted = await client.post(f"/users/{alice['id']}/roles", params={"role": "ADMIN"}, headers=admin["headers"])
    assert set(granted.json()["roles"]) == {"USER", "ADMIN"}

    revoked = await client.delete(f"/users/{alice['id']}/roles", params={"role": "USER"}, headers=admin["headers"])
    assert revoked.json()["roles"] == ["ADMIN"]
