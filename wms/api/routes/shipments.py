"""Shipment Routes — carrier shipments for orders.

Invariants:
    - List rows carry the order and the creating user; detail carries the order
    - update_order_status=true ships the parent order in the same transaction
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.shipping import (
    ShipmentCreate, ShipmentDetail, ShipmentResponse, ShipmentUpdate,
)
from wms.services.expansion import expand_shipments
from wms.services.repositories import ShipmentRepository
from wms.services.shipments import create_shipment, update_shipment

router = APIRouter(
    prefix="/api/v1/shipments", tags=["shipments"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[ShipmentDetail])
async def list_shipments(
    order_id: int | None = None, db: AsyncSession = Depends(get_db),
):
    rows = await ShipmentRepository(db).list(order_id=order_id)
    return await expand_shipments(db, rows)


@router.get("/{shipment_id}", response_model=ShipmentDetail)
async def get_shipment(shipment_id: int, db: AsyncSession = Depends(get_db)):
    row = await ShipmentRepository(db).require(shipment_id)
    return (await expand_shipments(db, [row], include_user=False))[0]


@router.post(
    "", response_model=ShipmentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_shipment_route(
    body: ShipmentCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    shipment = await create_shipment(db, body, principal)
    await db.commit()
    return shipment


@router.patch("/{shipment_id}", response_model=ShipmentResponse)
async def update_shipment_route(
    shipment_id: int,
    body: ShipmentUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    shipment = await update_shipment(db, shipment_id, body, principal)
    await db.commit()
    return shipment
