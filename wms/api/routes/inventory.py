"""Inventory Routes — stock levels per (item, bin), receipts and adjustments.

Invariants:
    - POST is a receipt: it merges into an existing (item, bin) row
    - PATCH is an adjustment: a quantity change writes a ledger entry
    - Read responses carry the related item and bin
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.inventory import (
    InventoryCreate, InventoryDetail, InventoryResponse, InventoryUpdate,
)
from wms.services.expansion import expand_inventory
from wms.services.inventory import adjust_inventory, receive_stock
from wms.services.repositories import InventoryRepository

router = APIRouter(
    prefix="/api/v1/inventory", tags=["inventory"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[InventoryDetail])
async def list_inventory(
    item_id: int | None = None,
    bin_id: int | None = None,
    db: AsyncSession = Depends(get_db),
):
    rows = await InventoryRepository(db).list(item_id=item_id, bin_id=bin_id)
    return await expand_inventory(db, rows)


@router.get("/{inventory_id}", response_model=InventoryDetail)
async def get_inventory(inventory_id: int, db: AsyncSession = Depends(get_db)):
    row = await InventoryRepository(db).require(inventory_id)
    return (await expand_inventory(db, [row]))[0]


@router.post(
    "", response_model=InventoryResponse, status_code=status.HTTP_201_CREATED,
)
async def receive_inventory(
    body: InventoryCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    row = await receive_stock(db, body, principal)
    await db.commit()
    return row


@router.patch("/{inventory_id}", response_model=InventoryResponse)
async def update_inventory(
    inventory_id: int,
    body: InventoryUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    row = await adjust_inventory(db, inventory_id, body, principal)
    await db.commit()
    return row
