"""Request Dependencies — principal resolution and the route permission gate.

Invariants:
    - get_current_principal raises AuthenticationError (401) without a live session
    - enforce_route_permission runs on every protected router and consults
      ROUTE_PERMISSIONS with the matched route's path template
    - A protected route missing from the manifest is refused (403) and logged
    - FastAPI caches dependencies per request: the session is resolved once

Design Decisions:
    - Route template (request.scope["route"].path) over the raw URL: the manifest
      is keyed by "/api/v1/items/{item_id}", not by concrete ids
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from wms.config import get_settings
from wms.core.errors import AuthenticationError, PermissionDeniedError
from wms.core.permissions import UNLISTED, required_permission, role_grants
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.services.auth import build_principal, resolve_session

logger = logging.getLogger(__name__)


async def get_current_principal(
    request: Request, db: AsyncSession = Depends(get_db),
) -> Principal:
    """Resolve the session cookie to the acting user and role."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if not token:
        raise AuthenticationError()
    user = await resolve_session(db, token)
    if user is None:
        # persist removal of an expired session before refusing
        await db.commit()
        raise AuthenticationError("Session expired or invalid")
    return await build_principal(db, user)


async def enforce_route_permission(
    request: Request, principal: Principal = Depends(get_current_principal),
) -> Principal:
    """Permission gate for the matched route. Returns the principal on success."""
    route = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    required = required_permission(request.method, path)

    if required is UNLISTED:
        logger.error(
            f"Route {request.method} {path} has no permission entry; denied",
            extra={"user_id": principal.id, "path": path, "method": request.method},
        )
        raise PermissionDeniedError(None)
    if required is None:
        return principal
    if not role_grants(principal.permissions, required.value):
        logger.warning(
            f"Permission {required.value} denied for {principal.username}",
            extra={
                "user_id": principal.id,
                "permission": required.value,
                "path": path,
            },
        )
        raise PermissionDeniedError(required.value)
    return principal
