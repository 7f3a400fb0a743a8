"""Inventory ORM — on-hand and allocated quantity of one item in one bin.

Invariants:
    - (item_id, bin_id) is unique; receipts merge into the existing row
    - allocated_quantity <= quantity (enforced in core/inventory_math.py)
"""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from wms.db.base import Base


class Inventory(Base):
    __tablename__ = "inventory"
    __table_args__ = (
        UniqueConstraint("item_id", "bin_id", name="uq_inventory_item_bin"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("items.id"), nullable=False, index=True,
    )
    bin_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("bins.id"), nullable=False, index=True,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    allocated_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
