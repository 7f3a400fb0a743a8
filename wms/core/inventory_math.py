"""Inventory Arithmetic — pure quantity rules for receipts, adjustments and stock levels.

Invariants:
    - A receipt into an existing (item, bin) row adds to it; it never creates a second row
    - allocated_quantity never exceeds quantity after a merge or adjustment
    - Ledger delta for an adjustment is new - old (zero when unchanged)
    - available = quantity - allocated_quantity
"""

from dataclasses import dataclass

from wms.core.errors import BusinessRuleError


@dataclass(frozen=True)
class StockLevel:
    """On-hand and allocated quantity for one (item, bin) row."""
    quantity: int
    allocated_quantity: int = 0

    @property
    def available(self) -> int:
        return self.quantity - self.allocated_quantity


def merge_receipt(existing: StockLevel, incoming: StockLevel) -> StockLevel:
    """Add an incoming receipt to an existing row."""
    merged = StockLevel(
        quantity=existing.quantity + incoming.quantity,
        allocated_quantity=existing.allocated_quantity + incoming.allocated_quantity,
    )
    check_allocation(merged)
    return merged


def adjustment_delta(old_quantity: int, new_quantity: int | None) -> int:
    """Signed ledger delta for an adjustment. None means quantity not touched."""
    if new_quantity is None:
        return 0
    return new_quantity - old_quantity


def check_allocation(level: StockLevel) -> None:
    """Raise when more stock is allocated than is on hand."""
    if level.allocated_quantity > level.quantity:
        raise BusinessRuleError(
            f"Allocated quantity ({level.allocated_quantity}) exceeds "
            f"on-hand quantity ({level.quantity})",
            "OVER_ALLOCATED",
        )


def is_low_stock(on_hand: int, reorder_point: int | None) -> bool:
    """Item needs restocking when on-hand is at or below its reorder point."""
    if reorder_point is None:
        return False
    return on_hand <= reorder_point
