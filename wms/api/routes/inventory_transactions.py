"""Inventory Transaction Routes — read-only stock ledger."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission
from wms.infrastructure.database import get_db
from wms.schemas.inventory import InventoryTransactionDetail
from wms.services.expansion import expand_transactions
from wms.services.repositories import InventoryTransactionRepository

router = APIRouter(
    prefix="/api/v1/inventory-transactions", tags=["inventory"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[InventoryTransactionDetail])
async def list_inventory_transactions(
    item_id: int | None = None,
    bin_id: int | None = None,
    db: AsyncSession = Depends(get_db),
):
    rows = await InventoryTransactionRepository(db).list(
        item_id=item_id, bin_id=bin_id,
    )
    return await expand_transactions(db, rows)
