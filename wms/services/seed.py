"""Default Data Seeding — roles, a default organization and the admin user.

Invariants:
    - Runs only when the users table is empty; never touches existing data
    - Admin user belongs to the seeded organization with the Global Admin role
    - Commits its own transaction (called at startup or from the command line)

Usage:
    python -m wms.services.seed
"""

import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.config import Settings, get_settings
from wms.core.domain_types import RoleScope
from wms.core.permissions import (
    WILDCARD_PERMISSION, Permission, organization_scoped_permissions,
)
from wms.infrastructure.security import hash_password
from wms.models import Organization, Role, User

logger = logging.getLogger(__name__)

WAREHOUSE_WORKER_PERMISSIONS = [
    Permission.INVENTORY_CREATE.value,
    Permission.INVENTORY_UPDATE.value,
    Permission.ORDERS_READ.value,
    Permission.ORDERS_UPDATE.value,
    Permission.SHIPPING_CREATE.value,
    Permission.SHIPPING_UPDATE.value,
]

CUSTOMER_PERMISSIONS = [
    Permission.ORDERS_READ.value,
    Permission.ORDERS_CREATE.value,
]


def default_roles() -> list[Role]:
    return [
        Role(
            name="Global Admin",
            description="Full access to all features across all organizations",
            permissions=[WILDCARD_PERMISSION],
            scope=RoleScope.GLOBAL.value,
        ),
        Role(
            name="Organization Admin",
            description="Full access within a specific organization",
            permissions=organization_scoped_permissions(),
            scope=RoleScope.ORGANIZATION.value,
        ),
        Role(
            name="Warehouse Worker",
            description="Basic access to warehouse operations",
            permissions=WAREHOUSE_WORKER_PERMISSIONS,
            scope=RoleScope.ORGANIZATION.value,
        ),
        Role(
            name="Customer User",
            description="Limited access for customers",
            permissions=CUSTOMER_PERMISSIONS,
            scope=RoleScope.CUSTOMER.value,
        ),
    ]


async def seed_defaults(db: AsyncSession, settings: Settings) -> bool:
    """Insert default data into an empty database. Returns True when seeded."""
    user_count = await db.scalar(select(func.count(User.id)))
    if user_count:
        logger.info("Seed skipped: users already exist")
        return False

    roles = default_roles()
    db.add_all(roles)
    organization = Organization(
        name=settings.seed_organization_name,
        description="Main organization",
        is_active=True,
    )
    db.add(organization)
    await db.flush()

    db.add(User(
        username=settings.seed_admin_username,
        password_hash=hash_password(settings.seed_admin_password),
        email=settings.seed_admin_email,
        full_name="Admin User",
        is_active=True,
        organization_id=organization.id,
        role_id=roles[0].id,
    ))
    await db.commit()
    logger.info(
        f"Seeded {len(roles)} roles, organization "
        f"'{organization.name}' and user '{settings.seed_admin_username}'",
    )
    return True


async def _main() -> None:
    from wms.db.session import create_session_factory
    from wms.infrastructure.observability import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, "text")
    session_factory = create_session_factory(settings.database_url)
    async with session_factory() as db:
        await seed_defaults(db, settings)
    await session_factory.kw["bind"].dispose()


if __name__ == "__main__":
    asyncio.run(_main())
