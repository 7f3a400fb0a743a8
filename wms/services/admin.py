"""User Administration — username uniqueness and password hashing around entity writes.

Invariants:
    - Username is unique: checked before insert and before rename
    - Plaintext passwords are hashed here and never reach the audit log
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.domain_types import EntityType
from wms.core.errors import DuplicateResourceError
from wms.infrastructure.security import hash_password
from wms.models import User
from wms.schemas.admin import Principal, UserCreate, UserUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import UserRepository

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, body: UserCreate, actor: Principal) -> User:
    users = UserRepository(db)
    if await users.get_by_username(body.username):
        raise DuplicateResourceError("User", "username", body.username)
    fields = body.model_dump(mode="json", exclude={"password"})
    user = await create_entity(
        db, users, EntityType.USER,
        {**fields, "password_hash": hash_password(body.password)},
        actor,
        details={"username": body.username, "email": body.email},
    )
    logger.info(f"User created: {user.username}", extra={"user_id": actor.id})
    return user


async def update_user(
    db: AsyncSession, user_id: int, body: UserUpdate, actor: Principal,
) -> User:
    users = UserRepository(db)
    changes = body.changes()
    new_username = changes.get("username")
    if new_username:
        existing = await users.get_by_username(new_username)
        if existing and existing.id != user_id:
            raise DuplicateResourceError("User", "username", new_username)
    password = changes.pop("password", None)
    details = dict(changes)
    if password:
        changes["password_hash"] = hash_password(password)
        details["password_changed"] = True
    return await update_entity(
        db, users, EntityType.USER, user_id, changes, actor, details=details,
    )