"""Entity Writes — generic create/update with parent checks and audit entries.

Invariants:
    - Every referenced parent id in a payload must exist (404 names the parent)
    - Exactly one audit entry per create or update, written in the same session
    - Audit organization = the entity's organization_id (an organization's own id)
    - Nothing here commits; the route commits once after all writes succeed
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.domain_types import AuditAction, EntityType
from wms.core.repository_protocols import EntityRepository
from wms.models import Organization
from wms.schemas.admin import Principal
from wms.services.audit import ActivityLogWriter
from wms.services.repositories import (
    BinRepository, BinTypeRepository, CategoryRepository, ItemRepository,
    OrderRepository, OrganizationRepository, RoleRepository,
    SqlAlchemyRepository, SupplierRepository, WarehouseRepository,
    ZoneRepository,
)

PARENT_REFERENCES: dict[str, type[SqlAlchemyRepository]] = {
    "organization_id": OrganizationRepository,
    "parent_id": OrganizationRepository,
    "role_id": RoleRepository,
    "warehouse_id": WarehouseRepository,
    "zone_id": ZoneRepository,
    "bin_type_id": BinTypeRepository,
    "category_id": CategoryRepository,
    "supplier_id": SupplierRepository,
    "item_id": ItemRepository,
    "bin_id": BinRepository,
    "order_id": OrderRepository,
}


async def check_parents(db: AsyncSession, fields: dict[str, Any]) -> None:
    """Raise ResourceNotFoundError for the first referenced parent that is missing."""
    for field_name, repo_cls in PARENT_REFERENCES.items():
        value = fields.get(field_name)
        if value is not None:
            await repo_cls(db).require(value)


def organization_of(entity: Any) -> int | None:
    if isinstance(entity, Organization):
        return entity.id
    return getattr(entity, "organization_id", None)


async def create_entity(
    db: AsyncSession,
    repo: EntityRepository,
    entity_type: EntityType,
    fields: dict[str, Any],
    actor: Principal,
    details: dict[str, Any] | None = None,
):
    await check_parents(db, fields)
    entity = await repo.create(**fields)
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.CREATE, entity_type, entity.id,
        fields if details is None else details,
        organization_id=organization_of(entity),
    )
    return entity


async def update_entity(
    db: AsyncSession,
    repo: EntityRepository,
    entity_type: EntityType,
    entity_id: int,
    changes: dict[str, Any],
    actor: Principal,
    details: dict[str, Any] | None = None,
):
    entity = await repo.require(entity_id)
    await check_parents(db, changes)
    await repo.update(entity, changes)
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.UPDATE, entity_type, entity.id,
        changes if details is None else details,
        organization_id=organization_of(entity),
    )
    return entity
