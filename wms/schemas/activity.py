"""Activity Log Schemas — read-only audit rows."""

from datetime import datetime
from typing import Any

from wms.schemas.admin import UserSummary
from wms.schemas.base import ResponseModel


class ActivityLogResponse(ResponseModel):
    id: int
    user_id: int
    action: str
    entity_type: str
    entity_id: str
    details: Any = None
    timestamp: datetime
    organization_id: int | None


class ActivityLogDetail(ActivityLogResponse):
    user: UserSummary | None = None
