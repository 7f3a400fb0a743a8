"""Reports — inventory CSV rows, low-stock items and order status counts.

Invariants:
    - Every report is scoped to one organization via the item / order owner
    - CSV rows come from a single joined query in inventory id order
    - Low stock: reorder_point set and total on-hand across bins <= reorder_point
    - Status summary lists every order status, zero when absent
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.csv_report import InventoryCsvRow
from wms.core.domain_types import OrderStatus
from wms.core.inventory_math import is_low_stock
from wms.models import Bin, Category, Inventory, Item, Order, Warehouse, Zone
from wms.schemas.reports import LowStockEntry, OrderStatusSummary


async def inventory_csv_rows(
    db: AsyncSession, organization_id: int,
) -> list[InventoryCsvRow]:
    result = await db.execute(
        select(
            Item.sku, Item.name, Category.name, Warehouse.name, Zone.name,
            Bin.code, Inventory.quantity, Inventory.allocated_quantity,
        )
        .select_from(Inventory)
        .join(Item, Item.id == Inventory.item_id)
        .join(Bin, Bin.id == Inventory.bin_id)
        .join(Zone, Zone.id == Bin.zone_id)
        .join(Warehouse, Warehouse.id == Zone.warehouse_id)
        .outerjoin(Category, Category.id == Item.category_id)
        .where(Item.organization_id == organization_id)
        .order_by(Inventory.id),
    )
    return [
        InventoryCsvRow(
            sku=sku,
            name=name,
            category=category or "",
            warehouse=warehouse,
            zone=zone,
            bin_code=bin_code,
            quantity=quantity,
            allocated=allocated,
        )
        for sku, name, category, warehouse, zone, bin_code, quantity, allocated
        in result.all()
    ]


async def low_stock_items(
    db: AsyncSession, organization_id: int,
) -> list[LowStockEntry]:
    on_hand = func.coalesce(func.sum(Inventory.quantity), 0)
    result = await db.execute(
        select(Item, on_hand)
        .outerjoin(Inventory, Inventory.item_id == Item.id)
        .where(
            Item.organization_id == organization_id,
            Item.reorder_point.is_not(None),
        )
        .group_by(Item.id)
        .order_by(Item.id),
    )
    return [
        LowStockEntry(
            item_id=item.id,
            sku=item.sku,
            name=item.name,
            on_hand=int(total),
            reorder_point=item.reorder_point,
            reorder_quantity=item.reorder_quantity,
        )
        for item, total in result.all()
        if is_low_stock(int(total), item.reorder_point)
    ]


async def order_status_summary(
    db: AsyncSession, organization_id: int,
) -> OrderStatusSummary:
    result = await db.execute(
        select(Order.status, func.count(Order.id))
        .where(Order.organization_id == organization_id)
        .group_by(Order.status),
    )
    counts = {s.value: 0 for s in OrderStatus}
    for status, count in result.all():
        counts[status] = count
    return OrderStatusSummary(
        organization_id=organization_id,
        counts=counts,
        total=sum(counts.values()),
    )
