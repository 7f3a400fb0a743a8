"""Activity Log Writer — append-only audit records for mutating actions.

Invariants:
    - Only inserts; no update or delete path exists
    - entity_id is stringified; timestamp is stamped in UTC at write time
    - Shares the caller's session: a rolled-back operation leaves no audit row
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.domain_types import AuditAction, EntityType
from wms.models import ActivityLog

logger = logging.getLogger(__name__)


class ActivityLogWriter:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def record(
        self,
        actor_id: int,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: int | str,
        details: dict[str, Any] | None = None,
        organization_id: int | None = None,
    ) -> ActivityLog:
        entry = ActivityLog(
            user_id=actor_id,
            action=AuditAction(action).value,
            entity_type=EntityType(entity_type).value,
            entity_id=str(entity_id),
            details=details,
            timestamp=datetime.now(timezone.utc),
            organization_id=organization_id,
        )
        self.db.add(entry)
        await self.db.flush()
        logger.info(
            f"Audit {entry.action} {entry.entity_type}/{entry.entity_id}",
            extra={
                "user_id": actor_id,
                "action": entry.action,
                "entity_type": entry.entity_type,
                "entity_id": entry.entity_id,
            },
        )
        return entry
