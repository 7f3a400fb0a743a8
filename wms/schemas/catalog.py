"""Catalog Schemas — categories, suppliers and items.

Invariants:
    - Item SKU is stripped and non-empty; uniqueness is checked per organization
    - Item weight in kg; dimensions in meters
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from wms.schemas.base import Dimensions, ResponseModel, UpdateModel


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    organization_id: int


class CategoryUpdate(UpdateModel):
    non_nullable = ("name", "organization_id")

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    organization_id: int | None = None


class CategoryResponse(ResponseModel):
    id: int
    name: str
    description: str | None
    organization_id: int


class ContactInfo(BaseModel):
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None


class SupplierCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=50)
    contact_info: ContactInfo | None = None
    organization_id: int


class SupplierUpdate(UpdateModel):
    non_nullable = ("name", "code", "organization_id")

    name: str | None = Field(None, min_length=1, max_length=200)
    code: str | None = Field(None, min_length=1, max_length=50)
    contact_info: ContactInfo | None = None
    organization_id: int | None = None


class SupplierResponse(ResponseModel):
    id: int
    name: str
    code: str
    contact_info: dict | None
    organization_id: int


class ItemCreate(BaseModel):
    sku: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    barcode: str | None = Field(None, max_length=100)
    category_id: int | None = None
    supplier_id: int | None = None
    dimensions: Dimensions | None = None
    weight: float | None = Field(None, ge=0)
    reorder_point: int | None = Field(None, ge=0)
    reorder_quantity: int | None = Field(None, ge=0)
    notes: str | None = None
    organization_id: int

    @field_validator("sku")
    @classmethod
    def strip_sku(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("sku cannot be empty or whitespace")
        return v


class ItemUpdate(UpdateModel):
    non_nullable = ("sku", "name", "organization_id")

    sku: str | None = Field(None, min_length=1, max_length=100)
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    barcode: str | None = Field(None, max_length=100)
    category_id: int | None = None
    supplier_id: int | None = None
    dimensions: Dimensions | None = None
    weight: float | None = Field(None, ge=0)
    reorder_point: int | None = Field(None, ge=0)
    reorder_quantity: int | None = Field(None, ge=0)
    notes: str | None = None
    organization_id: int | None = None


class ItemResponse(ResponseModel):
    id: int
    sku: str
    name: str
    description: str | None
    barcode: str | None
    category_id: int | None
    supplier_id: int | None
    dimensions: dict | None
    weight: float | None
    reorder_point: int | None
    reorder_quantity: int | None
    notes: str | None
    organization_id: int
