"""Report Schemas — low-stock and order-status summaries."""

from pydantic import BaseModel


class LowStockEntry(BaseModel):
    item_id: int
    sku: str
    name: str
    on_hand: int
    reorder_point: int
    reorder_quantity: int | None


class OrderStatusSummary(BaseModel):
    organization_id: int
    counts: dict[str, int]
    total: int
