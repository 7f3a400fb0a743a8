"""Order Routes — customer orders with nested lines.

Invariants:
    - Listing requires organization_id, optionally filtered by status
    - Detail and create responses include the order's lines, each with its item
    - Status updates are checked against the order state machine (409 otherwise)
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import OrderStatus
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.orders import (
    OrderCreate, OrderDetail, OrderResponse, OrderUpdate,
)
from wms.services.expansion import expand_order
from wms.services.orders import create_order, update_order
from wms.services.repositories import OrderRepository

router = APIRouter(
    prefix="/api/v1/orders", tags=["orders"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    organization_id: int = Query(...),
    status_filter: OrderStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    return await OrderRepository(db).list(
        organization_id=organization_id,
        status=status_filter.value if status_filter else None,
    )


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order(order_id: int, db: AsyncSession = Depends(get_db)):
    order = await OrderRepository(db).require(order_id)
    return await expand_order(db, order)


@router.post(
    "", response_model=OrderDetail, status_code=status.HTTP_201_CREATED,
)
async def create_order_route(
    body: OrderCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    order, lines = await create_order(db, body, principal)
    await db.commit()
    return await expand_order(db, order, lines)


@router.patch("/{order_id}", response_model=OrderResponse)
async def update_order_route(
    order_id: int,
    body: OrderUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    order = await update_order(db, order_id, body, principal)
    await db.commit()
    return order
