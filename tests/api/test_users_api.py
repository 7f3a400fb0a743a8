"""Users API — creation, uniqueness, partial updates and hash secrecy."""

NEW_USER = {
    "username": "picker1",
    "password": "secret123",
    "email": "picker1@example.com",
    "full_name": "Pat Picker",
    "organization_id": 1,
    "role_id": 3,
}


async def test_create_user_returns_record_without_password(admin_client):
    res = await admin_client.post("/api/v1/users", json=NEW_USER)
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "picker1"
    assert body["is_active"] is True
    assert "password" not in body and "password_hash" not in body


async def test_duplicate_username_rejected_without_second_record(admin_client):
    first = await admin_client.post("/api/v1/users", json=NEW_USER)
    assert first.status_code == 201
    second = await admin_client.post("/api/v1/users", json=NEW_USER)
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "DUPLICATE_RESOURCE"

    users = (await admin_client.get("/api/v1/users")).json()
    assert [u["username"] for u in users].count("picker1") == 1


async def test_invalid_payload_lists_every_field(admin_client):
    res = await admin_client.post("/api/v1/users", json={"username": "x"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert {"body.username", "body.password", "body.email", "body.full_name"} <= fields


async def test_partial_update_preserves_other_fields(admin_client):
    created = (await admin_client.post("/api/v1/users", json=NEW_USER)).json()
    res = await admin_client.patch(
        f"/api/v1/users/{created['id']}", json={"full_name": "Patricia Picker"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["full_name"] == "Patricia Picker"
    assert body["email"] == NEW_USER["email"]
    assert body["role_id"] == NEW_USER["role_id"]


async def test_rename_to_padded_existing_username_rejected(admin_client):
    created = (await admin_client.post("/api/v1/users", json=NEW_USER)).json()
    res = await admin_client.patch(
        f"/api/v1/users/{created['id']}", json={"username": " admin "},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"


async def test_password_change_allows_new_login(admin_client):
    created = (await admin_client.post("/api/v1/users", json=NEW_USER)).json()
    await admin_client.patch(
        f"/api/v1/users/{created['id']}", json={"password": "changed456"},
    )
    res = await admin_client.post(
        "/api/v1/auth/login", json={"username": "picker1", "password": "changed456"},
    )
    assert res.status_code == 200


async def test_unknown_role_is_404(admin_client):
    res = await admin_client.post("/api/v1/users", json={**NEW_USER, "role_id": 99})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Role '99' not found"


async def test_get_missing_user_is_404(admin_client):
    res = await admin_client.get("/api/v1/users/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_users_read_requires_permission(login_as, client):
    await login_as("viewer", ["orders:read"])
    res = await client.get("/api/v1/users")
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "PERMISSION_DENIED"
