"""Auth Routes — login, logout and current-user over a server-side session cookie.

Invariants:
    - Login failures are indistinguishable to the client (401 INVALID_CREDENTIALS)
    - The session cookie is HTTP-only, max-age = session TTL, secure per settings
    - Logout always succeeds, with or without a live session
"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from wms.api.dependencies import get_current_principal
from wms.config import get_settings
from wms.infrastructure.database import get_db
from wms.schemas.admin import Principal
from wms.schemas.auth import LoginRequest, LogoutResponse, PrincipalEnvelope
from wms.services.auth import (
    authenticate, build_principal, create_session, end_session,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=PrincipalEnvelope)
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Verify credentials and open a session."""
    settings = get_settings()
    user = await authenticate(db, body.username, body.password)
    session = await create_session(
        db,
        user,
        settings.session_ttl_hours,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    principal = await build_principal(db, user)
    await db.commit()

    response.set_cookie(
        settings.session_cookie_name,
        session.token,
        max_age=settings.session_ttl_hours * 3600,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    logger.info(f"User logged in: {user.username}", extra={"user_id": user.id})
    return PrincipalEnvelope(user=principal)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request, response: Response, db: AsyncSession = Depends(get_db),
):
    """Revoke the current session, if any, and clear the cookie."""
    settings = get_settings()
    if await end_session(db, request.cookies.get(settings.session_cookie_name)):
        await db.commit()
    response.delete_cookie(settings.session_cookie_name)
    return LogoutResponse(success=True)


@router.get("/current-user", response_model=PrincipalEnvelope)
async def current_user(principal: Principal = Depends(get_current_principal)):
    return PrincipalEnvelope(user=principal)
