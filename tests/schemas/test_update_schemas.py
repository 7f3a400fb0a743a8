"""Request Schemas — verifies partial updates, null guards and permission validation."""

import pytest
from pydantic import ValidationError

from wms.schemas.admin import RoleCreate, UserCreate, UserUpdate
from wms.schemas.catalog import ItemCreate, ItemUpdate
from wms.schemas.orders import OrderUpdate


def test_changes_contain_only_sent_fields():
    assert ItemUpdate(name="New").changes() == {"name": "New"}


def test_explicit_null_allowed_for_nullable_column():
    assert ItemUpdate(description=None).changes() == {"description": None}


def test_explicit_null_rejected_for_required_column():
    with pytest.raises(ValidationError):
        ItemUpdate(name=None)


def test_status_serializes_as_string():
    assert OrderUpdate(status="packed").changes() == {"status": "packed"}


def test_unknown_order_status_rejected():
    with pytest.raises(ValidationError):
        OrderUpdate(status="lost")


def test_role_permissions_must_be_known():
    with pytest.raises(ValidationError):
        RoleCreate(name="Bad", permissions=["orders:read", "orders:delete"])
    assert RoleCreate(name="Ok", permissions=["all"]).permissions == ["all"]


def test_user_create_reports_every_invalid_field():
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(username="ab", password="1", email="nope", full_name="")
    fields = {e["loc"][0] for e in exc_info.value.errors()}
    assert fields == {"username", "password", "email", "full_name"}


def test_item_sku_is_stripped():
    assert ItemCreate(sku="  SKU-9 ", name="x", organization_id=1).sku == "SKU-9"


def test_user_rename_is_stripped():
    assert UserUpdate(username="  picker2 ").changes() == {"username": "picker2"}
    with pytest.raises(ValidationError):
        UserUpdate(username="  ab  ")
