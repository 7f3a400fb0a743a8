"""Order Item Routes — order lines. Lines are created with their order, never alone."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.orders import OrderItemDetail, OrderItemResponse, OrderItemUpdate
from wms.services.expansion import expand_order_items
from wms.services.orders import update_order_item
from wms.services.repositories import OrderItemRepository

router = APIRouter(
    prefix="/api/v1/order-items", tags=["orders"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[OrderItemDetail])
async def list_order_items(
    order_id: int = Query(...), db: AsyncSession = Depends(get_db),
):
    rows = await OrderItemRepository(db).list(order_id=order_id)
    return await expand_order_items(db, rows)


@router.get("/{order_item_id}", response_model=OrderItemDetail)
async def get_order_item(order_item_id: int, db: AsyncSession = Depends(get_db)):
    row = await OrderItemRepository(db).require(order_item_id)
    return (await expand_order_items(db, [row]))[0]


@router.patch("/{order_item_id}", response_model=OrderItemResponse)
async def update_order_item_route(
    order_item_id: int,
    body: OrderItemUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    row = await update_order_item(db, order_item_id, body, principal)
    await db.commit()
    return row
