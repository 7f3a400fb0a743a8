"""Item Routes — SKU master records. SKU is unique per organization."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.catalog import ItemCreate, ItemResponse, ItemUpdate
from wms.services.catalog import create_item, update_item
from wms.services.repositories import ItemRepository

router = APIRouter(
    prefix="/api/v1/items", tags=["items"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[ItemResponse])
async def list_items(
    organization_id: int = Query(...),
    category_id: int | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await ItemRepository(db).list(
        organization_id=organization_id, category_id=category_id,
    )


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: int, db: AsyncSession = Depends(get_db)):
    return await ItemRepository(db).require(item_id)


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item_route(
    body: ItemCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    item = await create_item(db, body, principal)
    await db.commit()
    return item


@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item_route(
    item_id: int,
    body: ItemUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    item = await update_item(db, item_id, body, principal)
    await db.commit()
    return item
