"""Shipment Workflows — shipment creation and status-guarded updates.

Invariants:
    - New shipments start pending with created_by = the acting principal
    - update_order_status=true moves the parent order to shipped through the
      order state machine; an illegal move aborts the whole request (409)
    - Shipment status changes go through check_transition()
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.domain_types import (
    AuditAction, EntityType, OrderStatus, ShipmentStatus,
)
from wms.core.status_transitions import check_transition
from wms.models import Shipment
from wms.schemas.admin import Principal
from wms.schemas.shipping import ShipmentCreate, ShipmentUpdate
from wms.services.audit import ActivityLogWriter
from wms.services.orders import transition_order
from wms.services.repositories import OrderRepository, ShipmentRepository

logger = logging.getLogger(__name__)


async def create_shipment(
    db: AsyncSession, body: ShipmentCreate, actor: Principal,
) -> Shipment:
    order = await OrderRepository(db).require(body.order_id)
    if body.update_order_status:
        await transition_order(db, order, OrderStatus.SHIPPED, actor)

    fields = body.model_dump(mode="json", exclude={"update_order_status"})
    shipment = await ShipmentRepository(db).create(
        **fields,
        status=ShipmentStatus.PENDING.value,
        created_by=actor.id,
        created_at=datetime.now(timezone.utc),
    )
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.CREATE, EntityType.SHIPMENT, shipment.id,
        {
            "order_id": order.id,
            "carrier": shipment.carrier,
            "tracking_number": shipment.tracking_number,
        },
        organization_id=order.organization_id,
    )
    logger.info(
        f"Shipment {shipment.id} created for order {order.order_number}",
        extra={"user_id": actor.id, "entity_type": "shipment", "entity_id": shipment.id},
    )
    return shipment


async def update_shipment(
    db: AsyncSession, shipment_id: int, body: ShipmentUpdate, actor: Principal,
) -> Shipment:
    shipments = ShipmentRepository(db)
    shipment = await shipments.require(shipment_id)
    changes = body.changes()
    if "status" in changes:
        check_transition("shipment", shipment.status, changes["status"])

    await shipments.update(shipment, changes)
    order = await OrderRepository(db).get(shipment.order_id)
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.UPDATE, EntityType.SHIPMENT, shipment.id, changes,
        organization_id=order.organization_id if order else None,
    )
    return shipment
