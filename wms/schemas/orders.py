"""Order Schemas — orders with nested lines, and order line updates.

Invariants:
    - New orders and lines always start pending; status is not accepted on create
    - Order lines have a strictly positive quantity
    - OrderDetail.items holds exactly the order's lines, each with its item
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from wms.core.domain_types import OrderItemStatus, OrderStatus
from wms.schemas.base import ResponseModel, UpdateModel
from wms.schemas.catalog import ItemResponse


class ShippingAddress(BaseModel):
    address1: str = Field(min_length=1, max_length=200)
    address2: str | None = Field(None, max_length=200)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    zip_code: str = Field(min_length=1, max_length=20)
    country: str = Field(min_length=1, max_length=100)


class OrderLineCreate(BaseModel):
    item_id: int
    quantity: int = Field(gt=0)


class OrderCreate(BaseModel):
    order_number: str = Field(min_length=1, max_length=100)
    customer_name: str = Field(min_length=1, max_length=200)
    customer_email: EmailStr | None = None
    shipping_address: ShippingAddress
    notes: str | None = None
    organization_id: int
    items: list[OrderLineCreate] = Field(default_factory=list)


class OrderUpdate(UpdateModel):
    non_nullable = ("customer_name", "shipping_address", "status")

    customer_name: str | None = Field(None, min_length=1, max_length=200)
    customer_email: EmailStr | None = None
    shipping_address: ShippingAddress | None = None
    status: OrderStatus | None = None
    notes: str | None = None


class OrderResponse(ResponseModel):
    id: int
    order_number: str
    customer_name: str
    customer_email: str | None
    shipping_address: dict
    status: OrderStatus
    notes: str | None
    organization_id: int
    created_by: int
    created_at: datetime
    updated_at: datetime | None


class OrderItemUpdate(UpdateModel):
    non_nullable = ("quantity", "allocated_quantity", "picked_quantity", "status")

    quantity: int | None = Field(None, gt=0)
    allocated_quantity: int | None = Field(None, ge=0)
    picked_quantity: int | None = Field(None, ge=0)
    status: OrderItemStatus | None = None


class OrderItemResponse(ResponseModel):
    id: int
    order_id: int
    item_id: int
    quantity: int
    allocated_quantity: int
    picked_quantity: int
    status: OrderItemStatus


class OrderItemDetail(OrderItemResponse):
    item: ItemResponse | None = None


class OrderDetail(OrderResponse):
    items: list[OrderItemDetail] = Field(default_factory=list)
