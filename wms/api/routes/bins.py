"""Bin Routes — storage locations, listed by zone or by warehouse.

Invariants:
    - List requires zone_id or warehouse_id; warehouse_id wins when both are given
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.core.errors import BusinessRuleError
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.warehouse import BinCreate, BinResponse, BinUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import BinRepository

router = APIRouter(
    prefix="/api/v1/bins", tags=["bins"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[BinResponse])
async def list_bins(
    zone_id: int | None = None,
    warehouse_id: int | None = None,
    db: AsyncSession = Depends(get_db),
):
    bins = BinRepository(db)
    if warehouse_id is not None:
        return await bins.list_by_warehouse(warehouse_id)
    if zone_id is not None:
        return await bins.list(zone_id=zone_id)
    raise BusinessRuleError(
        "Either zone_id or warehouse_id is required", "MISSING_FILTER",
    )


@router.get("/{bin_id}", response_model=BinResponse)
async def get_bin(bin_id: int, db: AsyncSession = Depends(get_db)):
    return await BinRepository(db).require(bin_id)


@router.post("", response_model=BinResponse, status_code=status.HTTP_201_CREATED)
async def create_bin(
    body: BinCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    bin_ = await create_entity(
        db, BinRepository(db), EntityType.BIN, body.model_dump(mode="json"),
        principal,
    )
    await db.commit()
    return bin_


@router.patch("/{bin_id}", response_model=BinResponse)
async def update_bin(
    bin_id: int,
    body: BinUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    bin_ = await update_entity(
        db, BinRepository(db), EntityType.BIN, bin_id, body.changes(), principal,
    )
    await db.commit()
    return bin_
