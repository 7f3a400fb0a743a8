"""Organization Routes — tenant records, optionally nested under a parent."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.admin import (
    OrganizationCreate, OrganizationResponse, OrganizationUpdate, Principal,
)
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import OrganizationRepository

router = APIRouter(
    prefix="/api/v1/organizations", tags=["organizations"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[OrganizationResponse])
async def list_organizations(
    parent_id: int | None = None, db: AsyncSession = Depends(get_db),
):
    return await OrganizationRepository(db).list(parent_id=parent_id)


@router.get("/{organization_id}", response_model=OrganizationResponse)
async def get_organization(organization_id: int, db: AsyncSession = Depends(get_db)):
    return await OrganizationRepository(db).require(organization_id)


@router.post(
    "", response_model=OrganizationResponse, status_code=status.HTTP_201_CREATED,
)
async def create_organization(
    body: OrganizationCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await create_entity(
        db, OrganizationRepository(db), EntityType.ORGANIZATION, body.model_dump(mode="json"), principal,
    )
    await db.commit()
    return entity


@router.patch("/{organization_id}", response_model=OrganizationResponse)
async def update_organization(
    organization_id: int,
    body: OrganizationUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await update_entity(
        db, OrganizationRepository(db), EntityType.ORGANIZATION, organization_id, body.changes(), principal,
    )
    await db.commit()
    return entity
