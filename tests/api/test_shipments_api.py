"""Shipments API — creation, order status flip and shipment state machine."""


async def test_shipment_starts_pending(admin_client, make_order):
    order = await make_order()
    res = await admin_client.post("/api/v1/shipments", json={
        "order_id": order["id"], "carrier": "UPS", "tracking_number": "1Z999",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "pending"
    assert body["created_by"] == 1
    assert body["created_at"] is not None


async def test_update_order_status_ships_the_order(admin_client, make_order):
    order = await make_order()
    url = f"/api/v1/orders/{order['id']}"
    for status in ("allocated", "packed"):
        assert (await admin_client.patch(url, json={"status": status})).status_code == 200
    res = await admin_client.post("/api/v1/shipments", json={
        "order_id": order["id"], "carrier": "FedEx", "update_order_status": True,
    })
    assert res.status_code == 201
    assert (await admin_client.get(url)).json()["status"] == "shipped"


async def test_illegal_order_flip_persists_nothing(admin_client, make_order):
    order = await make_order()
    await admin_client.patch(f"/api/v1/orders/{order['id']}", json={"status": "canceled"})
    res = await admin_client.post("/api/v1/shipments", json={
        "order_id": order["id"], "carrier": "DHL", "update_order_status": True,
    })
    assert res.status_code == 409
    listed = (await admin_client.get(
        "/api/v1/shipments", params={"order_id": order["id"]},
    )).json()
    assert listed == []


async def test_list_expands_order_and_creator(admin_client, make_order):
    order = await make_order()
    await admin_client.post("/api/v1/shipments", json={
        "order_id": order["id"], "carrier": "UPS",
    })
    rows = (await admin_client.get("/api/v1/shipments")).json()
    assert rows[0]["order"]["order_number"] == "SO-1"
    assert rows[0]["created_by_user"]["username"] == "admin"


async def test_shipment_status_follows_state_machine(admin_client, make_order):
    order = await make_order()
    shipment = (await admin_client.post("/api/v1/shipments", json={
        "order_id": order["id"], "carrier": "UPS",
    })).json()
    url = f"/api/v1/shipments/{shipment['id']}"
    assert (await admin_client.patch(url, json={"status": "shipped"})).status_code == 200
    assert (await admin_client.patch(url, json={"status": "pending"})).status_code == 409


async def test_shipment_for_missing_order_is_404(admin_client, seeded):
    res = await admin_client.post("/api/v1/shipments", json={
        "order_id": 999, "carrier": "UPS",
    })
    assert res.status_code == 404
