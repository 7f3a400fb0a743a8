"""Warehouse Schemas — warehouses, zones, bin types and bins."""

from pydantic import BaseModel, Field

from wms.schemas.base import Dimensions, ResponseModel, UpdateModel


class WarehouseCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=50)
    address: str | None = None
    organization_id: int


class WarehouseUpdate(UpdateModel):
    non_nullable = ("name", "code", "organization_id")

    name: str | None = Field(None, min_length=1, max_length=200)
    code: str | None = Field(None, min_length=1, max_length=50)
    address: str | None = None
    organization_id: int | None = None


class WarehouseResponse(ResponseModel):
    id: int
    name: str
    code: str
    address: str | None
    organization_id: int


class ZoneCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=50)
    warehouse_id: int


class ZoneUpdate(UpdateModel):
    non_nullable = ("name", "code", "warehouse_id")

    name: str | None = Field(None, min_length=1, max_length=200)
    code: str | None = Field(None, min_length=1, max_length=50)
    warehouse_id: int | None = None


class ZoneResponse(ResponseModel):
    id: int
    name: str
    code: str
    warehouse_id: int


class BinTypeCreate(BaseModel):
    """Bin capacity template. max_weight in kg, max_volume in cubic meters."""
    name: str = Field(min_length=1, max_length=200)
    max_weight: float | None = Field(None, ge=0)
    max_volume: float | None = Field(None, ge=0)
    dimensions: Dimensions | None = None
    organization_id: int


class BinTypeUpdate(UpdateModel):
    non_nullable = ("name", "organization_id")

    name: str | None = Field(None, min_length=1, max_length=200)
    max_weight: float | None = Field(None, ge=0)
    max_volume: float | None = Field(None, ge=0)
    dimensions: Dimensions | None = None
    organization_id: int | None = None


class BinTypeResponse(ResponseModel):
    id: int
    name: str
    max_weight: float | None
    max_volume: float | None
    dimensions: dict | None
    organization_id: int


class BinCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=50)
    zone_id: int
    bin_type_id: int | None = None
    is_active: bool = True


class BinUpdate(UpdateModel):
    non_nullable = ("name", "code", "zone_id", "is_active")

    name: str | None = Field(None, min_length=1, max_length=200)
    code: str | None = Field(None, min_length=1, max_length=50)
    zone_id: int | None = None
    bin_type_id: int | None = None
    is_active: bool | None = None


class BinResponse(ResponseModel):
    id: int
    name: str
    code: str
    zone_id: int
    bin_type_id: int | None
    is_active: bool
