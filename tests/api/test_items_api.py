"""Items API — SKU uniqueness per organization and category filtering."""


async def test_duplicate_sku_in_same_organization_rejected(admin_client, layout):
    res = await admin_client.post("/api/v1/items", json={
        "sku": "SKU-1", "name": "Copy", "organization_id": 1,
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"


async def test_same_sku_allowed_in_other_organization(admin_client, layout):
    other = (await admin_client.post("/api/v1/organizations", json={
        "name": "Other Co",
    })).json()
    res = await admin_client.post("/api/v1/items", json={
        "sku": "SKU-1", "name": "Widget", "organization_id": other["id"],
    })
    assert res.status_code == 201


async def test_renaming_sku_onto_existing_sku_rejected(admin_client, layout):
    second = (await admin_client.post("/api/v1/items", json={
        "sku": "SKU-2", "name": "Gadget", "organization_id": 1,
    })).json()
    res = await admin_client.patch(
        f"/api/v1/items/{second['id']}", json={"sku": "SKU-1"},
    )
    assert res.status_code == 400


async def test_updating_item_keeps_its_own_sku(admin_client, layout):
    item_id = layout["item"]["id"]
    res = await admin_client.patch(
        f"/api/v1/items/{item_id}", json={"sku": "SKU-1", "name": "Widget v2"},
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Widget v2"
    assert res.json()["reorder_point"] == 5


async def test_list_items_filtered_by_category(admin_client, layout):
    await admin_client.post("/api/v1/items", json={
        "sku": "SKU-2", "name": "Loose", "organization_id": 1,
    })
    res = await admin_client.get("/api/v1/items", params={
        "organization_id": 1, "category_id": layout["category"]["id"],
    })
    assert [i["sku"] for i in res.json()] == ["SKU-1"]
