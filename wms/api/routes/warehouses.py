"""Warehouse Routes — physical sites of an organization.

Invariants:
    - Listing requires organization_id; there is no cross-tenant listing
    - Creating a warehouse for a missing organization is a 404
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.warehouse import WarehouseCreate, WarehouseResponse, WarehouseUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import WarehouseRepository

router = APIRouter(
    prefix="/api/v1/warehouses", tags=["warehouses"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[WarehouseResponse])
async def list_warehouses(
    organization_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await WarehouseRepository(db).list(organization_id=organization_id)


@router.get("/{warehouse_id}", response_model=WarehouseResponse)
async def get_warehouse(warehouse_id: int, db: AsyncSession = Depends(get_db)):
    return await WarehouseRepository(db).require(warehouse_id)


@router.post(
    "", response_model=WarehouseResponse, status_code=status.HTTP_201_CREATED,
)
async def create_warehouse(
    body: WarehouseCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await create_entity(
        db, WarehouseRepository(db), EntityType.WAREHOUSE, body.model_dump(mode="json"), principal,
    )
    await db.commit()
    return entity


@router.patch("/{warehouse_id}", response_model=WarehouseResponse)
async def update_warehouse(
    warehouse_id: int,
    body: WarehouseUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await update_entity(
        db, WarehouseRepository(db), EntityType.WAREHOUSE, warehouse_id, body.changes(), principal,
    )
    await db.commit()
    return entity
