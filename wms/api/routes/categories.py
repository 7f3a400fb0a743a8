"""Category Routes — item groupings within an organization."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.catalog import CategoryCreate, CategoryResponse, CategoryUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import CategoryRepository

router = APIRouter(
    prefix="/api/v1/categories", tags=["categories"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    organization_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await CategoryRepository(db).list(organization_id=organization_id)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    return await CategoryRepository(db).require(category_id)


@router.post(
    "", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await create_entity(
        db, CategoryRepository(db), EntityType.CATEGORY, body.model_dump(mode="json"), principal,
    )
    await db.commit()
    return entity


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await update_entity(
        db, CategoryRepository(db), EntityType.CATEGORY, category_id, body.changes(), principal,
    )
    await db.commit()
    return entity
