"""Activity Log Routes — read-only audit trail, each row with its acting user."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import enforce_route_permission
from wms.core.domain_types import EntityType
from wms.infrastructure.database import get_db
from wms.schemas.activity import ActivityLogDetail
from wms.services.expansion import expand_activity_logs
from wms.services.repositories import ActivityLogRepository

router = APIRouter(
    prefix="/api/v1/activity-logs", tags=["activity-logs"],
    dependencies=[Depends(enforce_route_permission)],
)


@router.get("", response_model=list[ActivityLogDetail])
async def list_activity_logs(
    organization_id: int | None = None,
    entity_type: EntityType | None = None,
    entity_id: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    rows = await ActivityLogRepository(db).list(
        organization_id=organization_id,
        entity_type=entity_type.value if entity_type else None,
        entity_id=entity_id,
    )
    return await expand_activity_logs(db, rows)
