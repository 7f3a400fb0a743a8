"""Denormalization — attach related records to result sets with batch lookups.

Invariants:
    - One get_many() query per related entity type per result set, never per row
    - A missing related record renders as None
    - Input order is preserved
"""

from sqlalchemy.ext.asyncio import AsyncSession

from wms.models import (
    ActivityLog, Inventory, InventoryTransaction, Order, OrderItem, Shipment,
)
from wms.schemas.activity import ActivityLogDetail
from wms.schemas.admin import UserSummary
from wms.schemas.catalog import ItemResponse
from wms.schemas.inventory import InventoryDetail, InventoryTransactionDetail
from wms.schemas.orders import OrderDetail, OrderItemDetail, OrderResponse
from wms.schemas.shipping import ShipmentDetail
from wms.schemas.warehouse import BinResponse
from wms.services.repositories import (
    BinRepository, ItemRepository, OrderItemRepository, OrderRepository,
    UserRepository,
)


def _maybe(schema, row):
    return schema.model_validate(row) if row is not None else None


async def expand_inventory(
    db: AsyncSession, rows: list[Inventory],
) -> list[InventoryDetail]:
    items = await ItemRepository(db).get_many({r.item_id for r in rows})
    bins = await BinRepository(db).get_many({r.bin_id for r in rows})
    return [
        InventoryDetail.model_validate(r).model_copy(update={
            "item": _maybe(ItemResponse, items.get(r.item_id)),
            "bin": _maybe(BinResponse, bins.get(r.bin_id)),
        })
        for r in rows
    ]


async def expand_transactions(
    db: AsyncSession, rows: list[InventoryTransaction],
) -> list[InventoryTransactionDetail]:
    items = await ItemRepository(db).get_many({r.item_id for r in rows})
    bins = await BinRepository(db).get_many({r.bin_id for r in rows})
    users = await UserRepository(db).get_many({r.created_by for r in rows})
    return [
        InventoryTransactionDetail.model_validate(r).model_copy(update={
            "item": _maybe(ItemResponse, items.get(r.item_id)),
            "bin": _maybe(BinResponse, bins.get(r.bin_id)),
            "created_by_user": _maybe(UserSummary, users.get(r.created_by)),
        })
        for r in rows
    ]


async def expand_order_items(
    db: AsyncSession, rows: list[OrderItem],
) -> list[OrderItemDetail]:
    items = await ItemRepository(db).get_many({r.item_id for r in rows})
    return [
        OrderItemDetail.model_validate(r).model_copy(update={
            "item": _maybe(ItemResponse, items.get(r.item_id)),
        })
        for r in rows
    ]


async def expand_order(
    db: AsyncSession, order: Order, lines: list[OrderItem] | None = None,
) -> OrderDetail:
    """Order header plus its lines, each with its item."""
    if lines is None:
        lines = await OrderItemRepository(db).list(order_id=order.id)
    return OrderDetail.model_validate(order).model_copy(update={
        "items": await expand_order_items(db, lines),
    })


async def expand_shipments(
    db: AsyncSession, rows: list[Shipment], include_user: bool = True,
) -> list[ShipmentDetail]:
    orders = await OrderRepository(db).get_many({r.order_id for r in rows})
    users = (
        await UserRepository(db).get_many({r.created_by for r in rows})
        if include_user else {}
    )
    return [
        ShipmentDetail.model_validate(r).model_copy(update={
            "order": _maybe(OrderResponse, orders.get(r.order_id)),
            "created_by_user": _maybe(UserSummary, users.get(r.created_by)),
        })
        for r in rows
    ]


async def expand_activity_logs(
    db: AsyncSession, rows: list[ActivityLog],
) -> list[ActivityLogDetail]:
    users = await UserRepository(db).get_many({r.user_id for r in rows})
    return [
        ActivityLogDetail.model_validate(r).model_copy(update={
            "user": _maybe(UserSummary, users.get(r.user_id)),
        })
        for r in rows
    ]
