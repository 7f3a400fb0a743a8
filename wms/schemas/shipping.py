"""Shipping Schemas — shipments and their expanded views.

Invariants:
    - New shipments start pending
    - update_order_status is a request flag only; it is never stored
"""

from datetime import datetime

from pydantic import BaseModel, Field

from wms.core.domain_types import ShipmentStatus
from wms.schemas.admin import UserSummary
from wms.schemas.base import Dimensions, ResponseModel, UpdateModel
from wms.schemas.orders import OrderResponse


class ShipmentCreate(BaseModel):
    order_id: int
    carrier: str = Field(min_length=1, max_length=100)
    tracking_number: str | None = Field(None, max_length=100)
    shipping_cost: float | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=0)
    dimensions: Dimensions | None = None
    label_url: str | None = Field(None, max_length=500)
    update_order_status: bool = False


class ShipmentUpdate(UpdateModel):
    non_nullable = ("carrier", "status")

    carrier: str | None = Field(None, min_length=1, max_length=100)
    tracking_number: str | None = Field(None, max_length=100)
    shipping_cost: float | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=0)
    dimensions: Dimensions | None = None
    label_url: str | None = Field(None, max_length=500)
    status: ShipmentStatus | None = None


class ShipmentResponse(ResponseModel):
    id: int
    order_id: int
    carrier: str
    tracking_number: str | None
    shipping_cost: float | None
    weight: float | None
    dimensions: dict | None
    label_url: str | None
    status: ShipmentStatus
    created_by: int
    created_at: datetime


class ShipmentDetail(ShipmentResponse):
    order: OrderResponse | None = None
    created_by_user: UserSummary | None = None
