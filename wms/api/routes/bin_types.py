"""Bin Type Routes — capacity templates for bins."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.warehouse import BinTypeCreate, BinTypeResponse, BinTypeUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import BinTypeRepository

router = APIRouter(
    prefix="/api/v1/bin-types", tags=["bin-types"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[BinTypeResponse])
async def list_bin_types(
    organization_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await BinTypeRepository(db).list(organization_id=organization_id)


@router.get("/{bin_type_id}", response_model=BinTypeResponse)
async def get_bin_type(bin_type_id: int, db: AsyncSession = Depends(get_db)):
    return await BinTypeRepository(db).require(bin_type_id)


@router.post(
    "", response_model=BinTypeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_bin_type(
    body: BinTypeCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await create_entity(
        db, BinTypeRepository(db), EntityType.BIN_TYPE, body.model_dump(mode="json"), principal,
    )
    await db.commit()
    return entity


@router.patch("/{bin_type_id}", response_model=BinTypeResponse)
async def update_bin_type(
    bin_type_id: int,
    body: BinTypeUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await update_entity(
        db, BinTypeRepository(db), EntityType.BIN_TYPE, bin_type_id, body.changes(), principal,
    )
    await db.commit()
    return entity
