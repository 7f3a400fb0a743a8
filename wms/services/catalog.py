"""Catalog Writes — item SKU uniqueness around the generic entity writes.

Invariants:
    - SKU is unique within an organization, checked on create and on every
      update that touches sku or organization_id
"""

from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.domain_types import EntityType
from wms.core.errors import DuplicateResourceError
from wms.core.repository_protocols import ItemStore
from wms.models import Item
from wms.schemas.admin import Principal
from wms.schemas.catalog import ItemCreate, ItemUpdate
from wms.services.entities import create_entity, update_entity
from wms.services.repositories import ItemRepository


async def _check_sku_free(
    items: ItemStore, sku: str, organization_id: int, item_id: int | None = None,
) -> None:
    existing = await items.get_by_sku(sku, organization_id)
    if existing is not None and existing.id != item_id:
        raise DuplicateResourceError("Item", "sku", sku)


async def create_item(db: AsyncSession, body: ItemCreate, actor: Principal) -> Item:
    items = ItemRepository(db)
    await _check_sku_free(items, body.sku, body.organization_id)
    fields = body.model_dump(mode="json")
    return await create_entity(
        db, items, EntityType.ITEM, fields, actor,
        details={"sku": body.sku, "name": body.name},
    )


async def update_item(
    db: AsyncSession, item_id: int, body: ItemUpdate, actor: Principal,
) -> Item:
    items = ItemRepository(db)
    current = await items.require(item_id)
    changes = body.changes()
    if "sku" in changes or "organization_id" in changes:
        await _check_sku_free(
            items,
            changes.get("sku", current.sku),
            changes.get("organization_id", current.organization_id),
            item_id,
        )
    return await update_entity(db, items, EntityType.ITEM, item_id, changes, actor)
