"""Role Routes — named permission sets.

Invariants:
    - Permissions are validated against the known permission strings on write
    - roles:create and roles:update are withheld from organization admins
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal, RoleCreate, RoleResponse, RoleUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import RoleRepository

router = APIRouter(
    prefix="/api/v1/roles", tags=["roles"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[RoleResponse])
async def list_roles(db: AsyncSession = Depends(get_db)):
    return await RoleRepository(db).list()


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role(role_id: int, db: AsyncSession = Depends(get_db)):
    return await RoleRepository(db).require(role_id)


@router.post(
    "", response_model=RoleResponse, status_code=status.HTTP_201_CREATED,
)
async def create_role(
    body: RoleCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await create_entity(
        db, RoleRepository(db), EntityType.ROLE, body.model_dump(mode="json"), principal,
    )
    await db.commit()
    return entity


@router.patch("/{role_id}", response_model=RoleResponse)
async def update_role(
    role_id: int,
    body: RoleUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await update_entity(
        db, RoleRepository(db), EntityType.ROLE, role_id, body.changes(), principal,
    )
    await db.commit()
    return entity
