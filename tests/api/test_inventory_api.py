"""Inventory API — receipts merge per (item, bin), adjustments write ledger deltas.

Invariants:
    - Two receipts for the same (item, bin) leave one row with the summed quantity
    - Each non-empty receipt writes a receiving transaction; adjustments write new - old
    - allocated_quantity never exceeds quantity
"""


def _receipt(layout, quantity, **extra):
    return {
        "item_id": layout["item"]["id"],
        "bin_id": layout["bin"]["id"],
        "quantity": quantity,
        **extra,
    }


async def test_receipts_for_same_bin_merge(admin_client, layout):
    first = await admin_client.post("/api/v1/inventory", json=_receipt(layout, 10))
    second = await admin_client.post("/api/v1/inventory", json=_receipt(layout, 5))
    assert first.status_code == second.status_code == 201
    assert first.json()["id"] == second.json()["id"]

    rows = (await admin_client.get(
        "/api/v1/inventory", params={"item_id": layout["item"]["id"]},
    )).json()
    assert len(rows) == 1
    assert rows[0]["quantity"] == 15
    assert rows[0]["item"]["sku"] == "SKU-1"
    assert rows[0]["bin"]["code"] == "A-01"


async def test_each_receipt_writes_receiving_transaction(admin_client, layout):
    await admin_client.post(
        "/api/v1/inventory", json=_receipt(layout, 10, reference="PO-7"),
    )
    await admin_client.post("/api/v1/inventory", json=_receipt(layout, 5))
    ledger = (await admin_client.get("/api/v1/inventory-transactions")).json()
    assert [(t["type"], t["quantity"]) for t in ledger] == [
        ("receiving", 10), ("receiving", 5),
    ]
    assert ledger[0]["reference"] == "PO-7"
    assert ledger[0]["created_by_user"]["username"] == "admin"


async def test_empty_receipt_writes_no_transaction(admin_client, layout):
    res = await admin_client.post(
        "/api/v1/inventory", json=_receipt(layout, 0, allocated_quantity=0),
    )
    assert res.status_code == 201
    assert res.json()["quantity"] == 0
    ledger = (await admin_client.get("/api/v1/inventory-transactions")).json()
    assert ledger == []


async def test_receipt_audit_details(admin_client, layout):
    row = (await admin_client.post("/api/v1/inventory", json=_receipt(layout, 3))).json()
    logs = (await admin_client.get("/api/v1/activity-logs", params={
        "entity_type": "inventory", "entity_id": str(row["id"]),
    })).json()
    assert len(logs) == 1
    assert logs[0]["action"] == "create"
    assert logs[0]["organization_id"] == 1
    assert logs[0]["details"] == {
        "item_id": layout["item"]["id"],
        "bin_id": layout["bin"]["id"],
        "quantity": 3,
        "item_sku": "SKU-1",
        "bin_code": "A-01",
    }
    assert logs[0]["user"]["username"] == "admin"


async def test_adjustment_records_signed_delta(admin_client, layout):
    row = (await admin_client.post("/api/v1/inventory", json=_receipt(layout, 10))).json()
    res = await admin_client.patch(
        f"/api/v1/inventory/{row['id']}", json={"quantity": 7, "notes": "cycle count"},
    )
    assert res.status_code == 200
    assert res.json()["quantity"] == 7

    ledger = (await admin_client.get("/api/v1/inventory-transactions")).json()
    assert ledger[-1]["type"] == "adjustment"
    assert ledger[-1]["quantity"] == -3
    assert ledger[-1]["notes"] == "cycle count"


async def test_adjustment_without_quantity_change_writes_no_transaction(
    admin_client, layout,
):
    row = (await admin_client.post("/api/v1/inventory", json=_receipt(layout, 10))).json()
    await admin_client.patch(
        f"/api/v1/inventory/{row['id']}", json={"allocated_quantity": 4},
    )
    ledger = (await admin_client.get("/api/v1/inventory-transactions")).json()
    assert len(ledger) == 1

    logs = (await admin_client.get("/api/v1/activity-logs", params={
        "entity_type": "inventory",
    })).json()
    assert logs[-1]["details"] == {"allocated_quantity": 4, "quantity_change": 0}


async def test_over_allocation_rejected(admin_client, layout):
    row = (await admin_client.post("/api/v1/inventory", json=_receipt(layout, 2))).json()
    res = await admin_client.patch(
        f"/api/v1/inventory/{row['id']}", json={"allocated_quantity": 3},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "OVER_ALLOCATED"

    fetched = (await admin_client.get(f"/api/v1/inventory/{row['id']}")).json()
    assert fetched["allocated_quantity"] == 0


async def test_receipt_for_missing_item_is_404(admin_client, layout):
    res = await admin_client.post("/api/v1/inventory", json={
        "item_id": 999, "bin_id": layout["bin"]["id"], "quantity": 1,
    })
    assert res.status_code == 404


async def test_negative_receipt_rejected(admin_client, layout):
    res = await admin_client.post("/api/v1/inventory", json=_receipt(layout, -1))
    assert res.status_code == 400
