"""Zone Routes — areas inside a warehouse."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.warehouse import ZoneCreate, ZoneResponse, ZoneUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import ZoneRepository

router = APIRouter(
    prefix="/api/v1/zones", tags=["zones"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[ZoneResponse])
async def list_zones(
    warehouse_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await ZoneRepository(db).list(warehouse_id=warehouse_id)


@router.get("/{zone_id}", response_model=ZoneResponse)
async def get_zone(zone_id: int, db: AsyncSession = Depends(get_db)):
    return await ZoneRepository(db).require(zone_id)


@router.post(
    "", response_model=ZoneResponse, status_code=status.HTTP_201_CREATED,
)
async def create_zone(
    body: ZoneCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await create_entity(
        db, ZoneRepository(db), EntityType.ZONE, body.model_dump(mode="json"), principal,
    )
    await db.commit()
    return entity


@router.patch("/{zone_id}", response_model=ZoneResponse)
async def update_zone(
    zone_id: int,
    body: ZoneUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await update_entity(
        db, ZoneRepository(db), EntityType.ZONE, zone_id, body.changes(), principal,
    )
    await db.commit()
    return entity
