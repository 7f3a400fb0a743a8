"""Warehouse Layout API — warehouses, zones, bins, bin types and organizations."""


async def test_create_then_get_round_trips(admin_client):
    payload = {"name": "North", "code": "N1", "address": "1 Road", "organization_id": 1}
    created = (await admin_client.post("/api/v1/warehouses", json=payload)).json()
    fetched = (await admin_client.get(f"/api/v1/warehouses/{created['id']}")).json()
    assert fetched == {**payload, "id": created["id"]}


async def test_list_warehouses_requires_organization(admin_client):
    res = await admin_client.get("/api/v1/warehouses")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_missing_parent_warehouse_is_404(admin_client):
    res = await admin_client.post("/api/v1/zones", json={
        "name": "Ghost", "code": "G", "warehouse_id": 404,
    })
    assert res.status_code == 404
    assert res.json()["error"]["context"]["entity_type"] == "Warehouse"


async def test_bins_list_by_zone_or_warehouse(admin_client, layout):
    by_zone = await admin_client.get(
        "/api/v1/bins", params={"zone_id": layout["zone"]["id"]},
    )
    by_warehouse = await admin_client.get(
        "/api/v1/bins", params={"warehouse_id": layout["warehouse"]["id"]},
    )
    assert [b["id"] for b in by_zone.json()] == [layout["bin"]["id"]]
    assert by_warehouse.json() == by_zone.json()


async def test_bins_list_without_filter_is_400(admin_client):
    res = await admin_client.get("/api/v1/bins")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MISSING_FILTER"


async def test_bin_type_dimensions_round_trip(admin_client):
    created = (await admin_client.post("/api/v1/bin-types", json={
        "name": "Pallet",
        "max_weight": 1000,
        "dimensions": {"length": 1.2, "width": 0.8, "height": 1.5},
        "organization_id": 1,
    })).json()
    assert created["dimensions"] == {"length": 1.2, "width": 0.8, "height": 1.5}


async def test_partial_update_keeps_other_fields(admin_client, layout):
    bin_id = layout["bin"]["id"]
    res = await admin_client.patch(f"/api/v1/bins/{bin_id}", json={"is_active": False})
    assert res.status_code == 200
    assert res.json()["is_active"] is False
    assert res.json()["code"] == "A-01"


async def test_null_for_required_field_is_rejected(admin_client, layout):
    bin_id = layout["bin"]["id"]
    res = await admin_client.patch(f"/api/v1/bins/{bin_id}", json={"name": None})
    assert res.status_code == 400


async def test_worker_can_read_but_not_create_warehouses(login_as, client):
    await login_as("worker", ["inventory:create"])
    listed = await client.get("/api/v1/warehouses", params={"organization_id": 1})
    assert listed.status_code == 200
    created = await client.post("/api/v1/warehouses", json={
        "name": "X", "code": "X", "organization_id": 1,
    })
    assert created.status_code == 403


async def test_child_organization(admin_client):
    res = await admin_client.post("/api/v1/organizations", json={
        "name": "Subsidiary", "parent_id": 1,
    })
    assert res.status_code == 201
    children = (await admin_client.get(
        "/api/v1/organizations", params={"parent_id": 1},
    )).json()
    assert [o["name"] for o in children] == ["Subsidiary"]
