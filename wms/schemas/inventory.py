"""Inventory Schemas — stock receipts, adjustments and the transaction ledger.

Invariants:
    - InventoryCreate is a receipt: merged into an existing (item, bin) row when one exists
    - reference / notes on receipts and adjustments flow to the ledger entry, not the row
    - Expanded rows carry related records or None when the relation is missing
"""

from datetime import datetime

from pydantic import BaseModel, Field

from wms.core.domain_types import TransactionType
from wms.schemas.admin import UserSummary
from wms.schemas.base import ResponseModel, UpdateModel
from wms.schemas.catalog import ItemResponse
from wms.schemas.warehouse import BinResponse


class InventoryCreate(BaseModel):
    item_id: int
    bin_id: int
    quantity: int = Field(ge=0)
    allocated_quantity: int = Field(0, ge=0)
    reference: str | None = Field(None, max_length=200)
    notes: str | None = None


class InventoryUpdate(UpdateModel):
    non_nullable = ("quantity", "allocated_quantity")

    quantity: int | None = Field(None, ge=0)
    allocated_quantity: int | None = Field(None, ge=0)
    reference: str | None = Field(None, max_length=200)
    notes: str | None = None


class InventoryResponse(ResponseModel):
    id: int
    item_id: int
    bin_id: int
    quantity: int
    allocated_quantity: int


class InventoryDetail(InventoryResponse):
    item: ItemResponse | None = None
    bin: BinResponse | None = None


class InventoryTransactionResponse(ResponseModel):
    id: int
    item_id: int
    bin_id: int
    quantity: int
    type: TransactionType
    reference: str | None
    notes: str | None
    created_by: int
    timestamp: datetime


class InventoryTransactionDetail(InventoryTransactionResponse):
    item: ItemResponse | None = None
    bin: BinResponse | None = None
    created_by_user: UserSummary | None = None
