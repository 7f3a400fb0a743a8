"""Authentication — credential checks and the server-side session store.

Invariants:
    - Unknown user, wrong password and inactive user raise the same
      InvalidCredentialsError; only the log line names the reason
    - A session is a UserSession row; the cookie carries only its token
    - Expired sessions are removed when presented and never resolve
    - Sessions of deactivated users never resolve

Design Decisions:
    - Server-side rows over signed cookies: logout actually revokes the session
"""

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.errors import InvalidCredentialsError
from wms.core.repository_protocols import UserStore
from wms.infrastructure.security import new_session_token, verify_password
from wms.models import User, UserSession
from wms.schemas.admin import Principal, RoleResponse, UserResponse
from wms.services.repositories import RoleRepository, UserRepository

logger = logging.getLogger(__name__)


async def authenticate(db: AsyncSession, username: str, password: str) -> User:
    """Return the user for valid credentials or raise InvalidCredentialsError."""
    users: UserStore = UserRepository(db)
    user = await users.get_by_username(username)
    if user is None:
        logger.warning(f"Login failed for '{username}': unknown user")
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        logger.warning(
            f"Login failed for '{username}': wrong password",
            extra={"user_id": user.id},
        )
        raise InvalidCredentialsError()
    if not user.is_active:
        logger.warning(
            f"Login failed for '{username}': user inactive",
            extra={"user_id": user.id},
        )
        raise InvalidCredentialsError()
    return user


async def create_session(
    db: AsyncSession,
    user: User,
    ttl_hours: int,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> UserSession:
    now = datetime.now(timezone.utc)
    session = UserSession(
        token=new_session_token(),
        user_id=user.id,
        ip_address=ip_address,
        user_agent=(user_agent or "")[:255] or None,
        created_at=now,
        expires_at=now + timedelta(hours=ttl_hours),
    )
    db.add(session)
    await db.flush()
    logger.info(f"Session opened for {user.username}", extra={"user_id": user.id})
    return session


async def _find_session(db: AsyncSession, token: str) -> UserSession | None:
    result = await db.execute(
        select(UserSession).where(UserSession.token == token),
    )
    return result.scalar_one_or_none()


async def resolve_session(db: AsyncSession, token: str) -> User | None:
    """Return the active user behind a session token, or None."""
    session = await _find_session(db, token)
    if session is None:
        return None
    if session.expires_at <= datetime.now(timezone.utc):
        logger.info("Expired session removed", extra={"user_id": session.user_id})
        await db.delete(session)
        await db.flush()
        return None
    user = await UserRepository(db).get(session.user_id)
    if user is None or not user.is_active:
        return None
    return user


async def end_session(db: AsyncSession, token: str | None) -> bool:
    """Delete the session row if it exists. Returns True when one was removed."""
    if not token:
        return False
    session = await _find_session(db, token)
    if session is None:
        return False
    await db.delete(session)
    await db.flush()
    logger.info("Session closed", extra={"user_id": session.user_id})
    return True


async def build_principal(db: AsyncSession, user: User) -> Principal:
    role = await RoleRepository(db).get(user.role_id) if user.role_id else None
    return Principal(
        **UserResponse.model_validate(user).model_dump(),
        role=RoleResponse.model_validate(role) if role else None,
    )
