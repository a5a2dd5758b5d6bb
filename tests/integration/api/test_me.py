import pytest
from httpx import AsyncClient
from sqlalchemy import delete

from config import ApplicationConfig
from src.domain.entities import User

COOKIE = ApplicationConfig.SESSION_COOKIE_NAME


async def signup_and_login(client: AsyncClient, user: dict) -> None:
    assert (await client.post("/api/auth/signup", json=user)).status_code == 201
    response = await client.post("/api/auth/login", json={
        "emailOrUsername": user["username"],
        "password": user["password"],
    })
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_me_returns_public_identity(client: AsyncClient, test_data):
    user = test_data.get_copy("lifecycle_user")
    await signup_and_login(client, user)

    response = await client.get("/api/auth/me")

    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "lifecycle_user"
    assert data["email"] == "lifecycle@example.com"
    assert data["name"] == "Lifecycle User"
    assert "id" in data
    assert "password_hash" not in data


@pytest.mark.asyncio
async def test_me_without_cookie(client: AsyncClient):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_me_with_forged_cookie(client: AsyncClient):
    client.cookies.set(COOKIE, "forged-token-value", path=ApplicationConfig.SESSION_COOKIE_PATH)

    response = await client.get("/api/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_with_expired_session(client: AsyncClient, app, test_data):
    user = test_data.get_copy("lifecycle_user")
    await signup_and_login(client, user)

    manager = app.state.session_manager
    real_clock = manager.clock
    manager.clock = lambda: real_clock() + manager.ttl

    response = await client.get("/api/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_after_user_deleted(client: AsyncClient, test_data, db_session):
    user = test_data.get_copy("lifecycle_user")
    await signup_and_login(client, user)

    await db_session.execute(delete(User))
    await db_session.commit()

    response = await client.get("/api/auth/me")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_sessions_are_per_login(client: AsyncClient, app, test_data):
    """Two logins of one user hold independent sessions"""
    user = test_data.get_copy("lifecycle_user")
    await signup_and_login(client, user)
    first_token = client.cookies.get(COOKIE)

    response = await client.post("/api/auth/login", json={
        "emailOrUsername": user["email"],
        "password": user["password"],
    })
    assert response.status_code == 200
    second_token = client.cookies.get(COOKIE)
    assert first_token != second_token

    await app.state.session_manager.revoke(second_token)

    client.cookies.clear()
    client.cookies.set(COOKIE, first_token, path=ApplicationConfig.SESSION_COOKIE_PATH)
    response = await client.get("/api/auth/me")
    assert response.status_code == 200
