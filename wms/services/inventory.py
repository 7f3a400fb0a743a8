"""Inventory Workflows — stock receipts and adjustments with ledger entries.

Invariants:
    - A receipt merges into the locked (item, bin) row or inserts one; never two rows
    - A receipt with a non-zero quantity writes one "receiving" ledger entry (delta = incoming)
    - An adjustment writes an "adjustment" ledger entry only when quantity changes
    - allocated_quantity <= quantity after every write (OVER_ALLOCATED otherwise)
    - Audit organization = the item's organization

Design Decisions:
    - Row lock via SELECT ... FOR UPDATE plus the (item, bin) unique constraint:
      a concurrent first insert loses with an integrity error instead of a lost update
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.domain_types import AuditAction, EntityType, TransactionType
from wms.core.errors import ResourceNotFoundError
from wms.core.inventory_math import (
    StockLevel, adjustment_delta, check_allocation, merge_receipt,
)
from wms.models import Inventory
from wms.schemas.admin import Principal
from wms.schemas.inventory import InventoryCreate, InventoryUpdate
from wms.services.audit import ActivityLogWriter
from wms.services.repositories import (
    BinRepository, InventoryRepository, InventoryTransactionRepository,
    ItemRepository,
)

logger = logging.getLogger(__name__)


async def _write_ledger(
    db: AsyncSession,
    inventory: Inventory,
    delta: int,
    kind: TransactionType,
    actor: Principal,
    reference: str | None,
    notes: str | None,
) -> None:
    await InventoryTransactionRepository(db).create(
        item_id=inventory.item_id,
        bin_id=inventory.bin_id,
        quantity=delta,
        type=kind.value,
        reference=reference,
        notes=notes,
        created_by=actor.id,
        timestamp=datetime.now(timezone.utc),
    )


async def receive_stock(
    db: AsyncSession, body: InventoryCreate, actor: Principal,
) -> Inventory:
    """Add stock to a bin, merging with an existing row for the same item."""
    item = await ItemRepository(db).require(body.item_id)
    bin_ = await BinRepository(db).require(body.bin_id)
    inventory = InventoryRepository(db)

    incoming = StockLevel(body.quantity, body.allocated_quantity)
    row = await inventory.get_for_update(item.id, bin_.id)
    if row is not None:
        merged = merge_receipt(
            StockLevel(row.quantity, row.allocated_quantity), incoming,
        )
        await inventory.update(row, {
            "quantity": merged.quantity,
            "allocated_quantity": merged.allocated_quantity,
        })
        logger.info(
            f"Receipt merged into inventory {row.id}: +{body.quantity}",
            extra={"entity_type": "inventory", "entity_id": row.id},
        )
    else:
        check_allocation(incoming)
        row = await inventory.create(
            item_id=item.id,
            bin_id=bin_.id,
            quantity=incoming.quantity,
            allocated_quantity=incoming.allocated_quantity,
        )

    if body.quantity != 0:
        await _write_ledger(
            db, row, body.quantity, TransactionType.RECEIVING, actor,
            body.reference, body.notes,
        )
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.CREATE, EntityType.INVENTORY, row.id,
        {
            "item_id": item.id,
            "bin_id": bin_.id,
            "quantity": body.quantity,
            "item_sku": item.sku,
            "bin_code": bin_.code,
        },
        organization_id=item.organization_id,
    )
    return row


async def adjust_inventory(
    db: AsyncSession, inventory_id: int, body: InventoryUpdate, actor: Principal,
) -> Inventory:
    """Apply a partial update to an inventory row and record the quantity delta."""
    inventory = InventoryRepository(db)
    row = await inventory.lock(inventory_id)
    if row is None:
        raise ResourceNotFoundError("Inventory", inventory_id)

    changes = body.changes()
    reference = changes.pop("reference", None)
    notes = changes.pop("notes", None)
    check_allocation(StockLevel(
        changes.get("quantity", row.quantity),
        changes.get("allocated_quantity", row.allocated_quantity),
    ))
    delta = adjustment_delta(row.quantity, changes.get("quantity"))

    await inventory.update(row, changes)
    if delta != 0:
        await _write_ledger(
            db, row, delta, TransactionType.ADJUSTMENT, actor, reference, notes,
        )

    item = await ItemRepository(db).get(row.item_id)
    await ActivityLogWriter(db).record(
        actor.id, AuditAction.UPDATE, EntityType.INVENTORY, row.id,
        {**changes, "quantity_change": delta},
        organization_id=item.organization_id if item else None,
    )
    return row
