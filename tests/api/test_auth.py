"""Authentication — login, logout, current-user and session expiry.

Invariants:
    - Unknown user, wrong password and inactive user get the same 401 body
    - Login sets an HTTP-only session cookie; the response never carries a hash
    - Expired sessions are refused and removed
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from wms.infrastructure.security import hash_password
from wms.models import User, UserSession

ADMIN_CREDENTIALS = {"username": "admin", "password": "password"}


async def test_login_then_current_user_returns_admin(client, seeded):
    res = await client.post("/api/v1/auth/login", json=ADMIN_CREDENTIALS)
    assert res.status_code == 200
    user = res.json()["user"]
    assert user["username"] == "admin"
    assert "password_hash" not in user
    assert user["role"]["permissions"] == ["all"]

    me = await client.get("/api/v1/auth/current-user")
    assert me.status_code == 200
    assert me.json()["user"]["username"] == "admin"


async def test_login_sets_httponly_cookie(client, seeded):
    res = await client.post("/api/v1/auth/login", json=ADMIN_CREDENTIALS)
    cookie = res.headers["set-cookie"]
    assert cookie.startswith("wms_session=")
    assert "HttpOnly" in cookie
    assert "Max-Age=86400" in cookie


def _strip_timestamp(body: dict) -> dict:
    error = dict(body["error"])
    error.pop("timestamp")
    return error


async def test_wrong_password_and_unknown_user_are_indistinguishable(client, seeded):
    wrong = await client.post(
        "/api/v1/auth/login", json={"username": "admin", "password": "nope"},
    )
    unknown = await client.post(
        "/api/v1/auth/login", json={"username": "ghost", "password": "nope"},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert _strip_timestamp(wrong.json()) == _strip_timestamp(unknown.json())
    assert wrong.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_inactive_user_cannot_log_in(client, seeded, test_session_factory):
    async with test_session_factory() as session:
        session.add(User(
            username="dormant",
            password_hash=hash_password("secret123"),
            email="dormant@example.com",
            full_name="Dormant",
            is_active=False,
        ))
        await session.commit()
    res = await client.post(
        "/api/v1/auth/login", json={"username": "dormant", "password": "secret123"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_current_user_without_session_is_401(client):
    res = await client.get("/api/v1/auth/current-user")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHENTICATED"


async def test_logout_revokes_session(admin_client):
    res = await admin_client.post("/api/v1/auth/logout")
    assert res.json() == {"success": True}
    me = await admin_client.get("/api/v1/auth/current-user")
    assert me.status_code == 401


async def test_logout_without_session_succeeds(client):
    res = await client.post("/api/v1/auth/logout")
    assert res.status_code == 200
    assert res.json() == {"success": True}


async def test_expired_session_is_refused_and_removed(
    client, seeded, test_session_factory,
):
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    async with test_session_factory() as session:
        session.add(UserSession(
            token="stale-token", user_id=1,
            created_at=past - timedelta(hours=24), expires_at=past,
        ))
        await session.commit()

    client.cookies.set("wms_session", "stale-token")
    res = await client.get("/api/v1/auth/current-user")
    assert res.status_code == 401

    async with test_session_factory() as session:
        remaining = await session.scalar(
            select(func.count(UserSession.id)).where(
                UserSession.token == "stale-token",
            ),
        )
    assert remaining == 0


async def test_protected_route_requires_session(client, seeded):
    res = await client.get("/api/v1/items", params={"organization_id": 1})
    assert res.status_code == 401
