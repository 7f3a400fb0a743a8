"""Reports API — inventory CSV, low stock and order status summary."""

HEADER = "SKU,Name,Category,Warehouse,Zone,Bin,Quantity,Allocated,Available"


async def test_csv_for_organization_without_items_is_header_only(admin_client):
    empty = (await admin_client.post("/api/v1/organizations", json={
        "name": "Empty Co",
    })).json()
    res = await admin_client.get(
        "/api/v1/reports/inventory-csv", params={"organization_id": empty["id"]},
    )
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    assert 'filename="inventory-report.csv"' in res.headers["content-disposition"]
    assert res.text.splitlines() == [HEADER]


async def test_csv_rows(admin_client, layout):
    await admin_client.post("/api/v1/inventory", json={
        "item_id": layout["item"]["id"],
        "bin_id": layout["bin"]["id"],
        "quantity": 10,
        "allocated_quantity": 4,
    })
    res = await admin_client.get(
        "/api/v1/reports/inventory-csv", params={"organization_id": 1},
    )
    assert res.text.splitlines() == [
        HEADER,
        '"SKU-1","Widget","Widgets","Main","Zone A","A-01",10,4,6',
    ]


async def test_low_stock_lists_items_at_or_below_reorder_point(admin_client, layout):
    await admin_client.post("/api/v1/inventory", json={
        "item_id": layout["item"]["id"], "bin_id": layout["bin"]["id"], "quantity": 5,
    })
    await admin_client.post("/api/v1/items", json={
        "sku": "SKU-2", "name": "Untracked", "organization_id": 1,
    })
    res = await admin_client.get(
        "/api/v1/reports/low-stock", params={"organization_id": 1},
    )
    assert res.json() == [{
        "item_id": layout["item"]["id"],
        "sku": "SKU-1",
        "name": "Widget",
        "on_hand": 5,
        "reorder_point": 5,
        "reorder_quantity": 20,
    }]


async def test_order_status_summary_counts_every_status(admin_client, make_order):
    await make_order("SO-1")
    second = await make_order("SO-2")
    await admin_client.patch(f"/api/v1/orders/{second['id']}", json={"status": "canceled"})
    res = await admin_client.get(
        "/api/v1/reports/order-status-summary", params={"organization_id": 1},
    )
    body = res.json()
    assert body["total"] == 2
    assert body["counts"]["pending"] == 1
    assert body["counts"]["canceled"] == 1
    assert body["counts"]["delivered"] == 0


async def test_reports_require_permission(login_as, client):
    await login_as("clerk", ["orders:read"])
    res = await client.get("/api/v1/reports/low-stock", params={"organization_id": 1})
    assert res.status_code == 403


async def test_report_for_missing_organization_is_404(admin_client):
    res = await admin_client.get(
        "/api/v1/reports/inventory-csv", params={"organization_id": 404},
    )
    assert res.status_code == 404
