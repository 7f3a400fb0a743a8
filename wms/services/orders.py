"""Order Workflows — order creation with lines and status-guarded updates.

Invariants:
    - An order and all of its lines are written in one transaction
    - Order number is unique within an organization
    - Every line references an existing item of the order's organization
    - Status changes go through check_transition(); a real change writes a
      status_change audit entry in addition to the generic update entry
    - updated_at is stamped on every order update
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.domain_types import (
    AuditAction, EntityType, OrderItemStatus, OrderStatus,
)
from wms.core.errors import (
    BusinessRuleError, DuplicateResourceError, ResourceNotFoundError,
)
from wms.core.inventory_math import StockLevel, check_allocation
from wms.core.status_transitions import check_transition
from wms.models import Order, OrderItem
from wms.schemas.admin import Principal
from wms.schemas.orders import OrderCreate, OrderItemUpdate, OrderUpdate
from wms.services.audit import ActivityLogWriter
from wms.services.repositories import (
    ItemRepository, OrderItemRepository, OrderRepository, OrganizationRepository,
)

logger = logging.getLogger(__name__)


async def create_order(
    db: AsyncSession, body: OrderCreate, actor: Principal,
) -> tuple[Order, list[OrderItem]]:
    """Create an order header plus one pending line per submitted item."""
    await OrganizationRepository(db).require(body.organization_id)
    orders = OrderRepository(db)
    if await orders.get_by_number(body.order_number, body.organization_id):
        raise DuplicateResourceError("Order", "order_number", body.order_number)

    line_item_ids = {line.item_id for line in body.items}
    items = await ItemRepository(db).get_many(line_item_ids)
    for line in body.items:
        item = items.get(line.item_id)
        if item is None:
            raise ResourceNotFoundError("Item", line.item_id)
        if item.organization_id != body.organization_id:
            raise BusinessRuleError(
                f"Item '{item.id}' belongs to another organization",
                "ITEM_ORGANIZATION_MISMATCH",
            )

    fields = body.model_dump(mode="json", exclude={"items"})
    order = await orders.create(
        **fields,
        status=OrderStatus.PENDING.value,
        created_by=actor.id,
        created_at=datetime.now(timezone.utc),
    )
    lines = OrderItemRepository(db)
    created_lines = [
        await lines.create(
            order_id=order.id,
            item_id=line.item_id,
            quantity=line.quantity,
            allocated_quantity=0,
            picked_quantity=0,
            status=OrderItemStatus.PENDING.value,
        )
        for line in body.items
    ]
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.CREATE, EntityType.ORDER, order.id,
        {
            "order_number": order.order_number,
            "customer_name": order.customer_name,
            "item_count": len(created_lines),
        },
        organization_id=order.organization_id,
    )
    logger.info(
        f"Order {order.order_number} created with {len(created_lines)} lines",
        extra={"user_id": actor.id, "entity_type": "order", "entity_id": order.id},
    )
    return order, created_lines


async def _record_status_change(
    db: AsyncSession, order: Order, previous: str, actor: Principal,
) -> None:
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.STATUS_CHANGE, EntityType.ORDER, order.id,
        {
            "order_number": order.order_number,
            "previous_status": previous,
            "new_status": order.status,
        },
        organization_id=order.organization_id,
    )


async def transition_order(
    db: AsyncSession, order: Order, target: OrderStatus, actor: Principal,
) -> bool:
    """Move an order to `target` through the state machine. Returns True on change."""
    previous = order.status
    if not check_transition("order", previous, target):
        return False
    await OrderRepository(db).update(order, {
        "status": OrderStatus(target).value,
        "updated_at": datetime.now(timezone.utc),
    })
    await _record_status_change(db, order, previous, actor)
    return True


async def update_order(
    db: AsyncSession, order_id: int, body: OrderUpdate, actor: Principal,
) -> Order:
    orders = OrderRepository(db)
    order = await orders.require(order_id)
    changes = body.changes()
    previous = order.status
    status_changed = (
        "status" in changes
        and check_transition("order", previous, changes["status"])
    )

    await orders.update(
        order, {**changes, "updated_at": datetime.now(timezone.utc)},
    )
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.UPDATE, EntityType.ORDER, order.id, changes,
        organization_id=order.organization_id,
    )
    if status_changed:
        await _record_status_change(db, order, previous, actor)
    return order


async def update_order_item(
    db: AsyncSession, order_item_id: int, body: OrderItemUpdate, actor: Principal,
) -> OrderItem:
    lines = OrderItemRepository(db)
    line = await lines.require(order_item_id)
    changes = body.changes()
    if "status" in changes:
        check_transition("order_item", line.status, changes["status"])
    quantity = changes.get("quantity", line.quantity)
    check_allocation(StockLevel(
        quantity, changes.get("allocated_quantity", line.allocated_quantity),
    ))
    if changes.get("picked_quantity", line.picked_quantity) > quantity:
        raise BusinessRuleError(
            "Picked quantity exceeds ordered quantity", "OVER_PICKED",
        )

    await lines.update(line, changes)
    order = await OrderRepository(db).get(line.order_id)
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.UPDATE, EntityType.ORDER_ITEM, line.id,
        {**changes, "order_id": line.order_id},
        organization_id=order.organization_id if order else None,
    )
    return line
