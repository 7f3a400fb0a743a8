"""Supplier Routes — vendors of an organization's items."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission, get_current_principal
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.catalog import SupplierCreate, SupplierResponse, SupplierUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import SupplierRepository

router = APIRouter(
    prefix="/api/v1/suppliers", tags=["suppliers"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[SupplierResponse])
async def list_suppliers(
    organization_id: int = Query(...),
    db: AsyncSession = Depends(get_db),
):
    return await SupplierRepository(db).list(organization_id=organization_id)


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(supplier_id: int, db: AsyncSession = Depends(get_db)):
    return await SupplierRepository(db).require(supplier_id)


@router.post(
    "", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED,
)
async def create_supplier(
    body: SupplierCreate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await create_entity(
        db, SupplierRepository(db), EntityType.SUPPLIER, body.model_dump(mode="json"), principal,
    )
    await db.commit()
    return entity


@router.patch("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(
    supplier_id: int,
    body: SupplierUpdate,
    db: AsyncSession = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
):
    entity = await update_entity(
        db, SupplierRepository(db), EntityType.SUPPLIER, supplier_id, body.changes(), principal,
    )
    await db.commit()
    return entity
