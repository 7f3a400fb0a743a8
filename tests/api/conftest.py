"""API test fixtures — FastAPI test client, seeded admin and ready-made layouts.

Invariants:
    - get_db dependency overridden to use the test database
    - db_manager patched so health probes reach the test database
    - The client keeps cookies: after a login, later requests carry the session

Design Decisions:
    - Seeding runs the production seed routine, so the admin credentials and
      default roles under test are the real defaults
"""

import pytest
from httpx import ASGITransport, AsyncClient

import wms.infrastructure.database as db_module
from wms.config import get_settings
from wms.core.domain_types import RoleScope
from wms.infrastructure.database import DatabaseSessionManager, get_db
from wms.infrastructure.security import hash_password
from wms.main import app
from wms.models import Role, User
from wms.services.seed import seed_defaults

ADMIN_CREDENTIALS = {"username": "admin", "password": "password"}

SHIPPING_ADDRESS = {
    "address1": "1 Dock Road",
    "city": "Springfield",
    "state": "IL",
    "zip_code": "62701",
    "country": "US",
}


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seeded(test_session_factory):
    async with test_session_factory() as session:
        await seed_defaults(session, get_settings())


@pytest.fixture
async def admin_client(client, seeded):
    res = await client.post("/api/v1/auth/login", json=ADMIN_CREDENTIALS)
    assert res.status_code == 200
    return client


@pytest.fixture
def login_as(client, seeded, test_session_factory):
    """Create a user holding exactly `permissions` and log the client in as it."""

    async def _login(username: str, permissions: list[str]) -> dict:
        async with test_session_factory() as session:
            role = Role(
                name=f"{username} role",
                permissions=permissions,
                scope=RoleScope.ORGANIZATION.value,
            )
            session.add(role)
            await session.flush()
            session.add(User(
                username=username,
                password_hash=hash_password("secret123"),
                email=f"{username}@example.com",
                full_name=username.title(),
                organization_id=1,
                role_id=role.id,
            ))
            await session.commit()
        res = await client.post(
            "/api/v1/auth/login",
            json={"username": username, "password": "secret123"},
        )
        assert res.status_code == 200
        return res.json()["user"]

    return _login


@pytest.fixture
async def layout(admin_client):
    """Warehouse, zone, bin, category and item in the seeded organization."""
    c = admin_client
    warehouse = (await c.post("/api/v1/warehouses", json={
        "name": "Main", "code": "WH1", "organization_id": 1,
    })).json()
    zone = (await c.post("/api/v1/zones", json={
        "name": "Zone A", "code": "A", "warehouse_id": warehouse["id"],
    })).json()
    bin_ = (await c.post("/api/v1/bins", json={
        "name": "Bin 1", "code": "A-01", "zone_id": zone["id"],
    })).json()
    category = (await c.post("/api/v1/categories", json={
        "name": "Widgets", "organization_id": 1,
    })).json()
    item = (await c.post("/api/v1/items", json={
        "sku": "SKU-1",
        "name": "Widget",
        "category_id": category["id"],
        "organization_id": 1,
        "reorder_point": 5,
        "reorder_quantity": 20,
    })).json()
    return {
        "organization_id": 1,
        "warehouse": warehouse,
        "zone": zone,
        "bin": bin_,
        "category": category,
        "item": item,
    }


@pytest.fixture
def make_order(admin_client, layout):
    async def _make(order_number: str = "SO-1", quantities: tuple[int, ...] = (2,)):
        res = await admin_client.post("/api/v1/orders", json={
            "order_number": order_number,
            "customer_name": "Acme Corp",
            "customer_email": "buyer@acme.com",
            "shipping_address": SHIPPING_ADDRESS,
            "organization_id": 1,
            "items": [
                {"item_id": layout["item"]["id"], "quantity": q}
                for q in quantities
            ],
        })
        assert res.status_code == 201, res.text
        return res.json()

    return _make
