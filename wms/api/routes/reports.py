"""Report Routes — inventory CSV export, low-stock list and order status summary.

Invariants:
    - Every report requires an existing organization_id (404 otherwise)
    - CSV export is an attachment named inventory-report.csv
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission
from wms.core.csv_report import INVENTORY_CSV_FILENAME, render_inventory_csv
from wms.infrastructure.database import get_db
from wms.schemas.reports import LowStockEntry, OrderStatusSummary
from wms.services.reports import (
    inventory_csv_rows, low_stock_items, order_status_summary,
)
from wms.services.repositories import OrganizationRepository

router = APIRouter(
    prefix="/api/v1/reports", tags=["reports"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("/inventory-csv")
async def export_inventory_csv(
    organization_id: int = Query(...), db: AsyncSession = Depends(get_db),
):
    await OrganizationRepository(db).require(organization_id)
    document = render_inventory_csv(await inventory_csv_rows(db, organization_id))
    return Response(
        content=document,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{INVENTORY_CSV_FILENAME}"',
        },
    )


@router.get("/low-stock", response_model=list[LowStockEntry])
async def low_stock_report(
    organization_id: int = Query(...), db: AsyncSession = Depends(get_db),
):
    await OrganizationRepository(db).require(organization_id)
    return await low_stock_items(db, organization_id)


@router.get("/order-status-summary", response_model=OrderStatusSummary)
async def order_status_report(
    organization_id: int = Query(...), db: AsyncSession = Depends(get_db),
):
    await OrganizationRepository(db).require(organization_id)
    return await order_status_summary(db, organization_id)
