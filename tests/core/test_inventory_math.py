"""Inventory Arithmetic — verifies receipt merges, adjustment deltas and allocation limits."""

import pytest

from wms.core.errors import BusinessRuleError
from wms.core.inventory_math import (
    StockLevel, adjustment_delta, check_allocation, is_low_stock, merge_receipt,
)


def test_receipt_adds_to_existing_row():
    merged = merge_receipt(StockLevel(10, 2), StockLevel(5, 1))
    assert merged == StockLevel(15, 3)
    assert merged.available == 12


def test_receipt_cannot_over_allocate():
    with pytest.raises(BusinessRuleError) as exc_info:
        merge_receipt(StockLevel(1, 1), StockLevel(0, 1))
    assert exc_info.value.code == "OVER_ALLOCATED"


def test_adjustment_delta_is_new_minus_old():
    assert adjustment_delta(10, 7) == -3
    assert adjustment_delta(10, 12) == 2


def test_adjustment_without_quantity_has_zero_delta():
    assert adjustment_delta(10, None) == 0


def test_full_allocation_is_allowed():
    check_allocation(StockLevel(4, 4))


def test_low_stock_at_or_below_reorder_point():
    assert is_low_stock(5, 5)
    assert is_low_stock(0, 5)
    assert not is_low_stock(6, 5)


def test_no_reorder_point_is_never_low():
    assert not is_low_stock(0, None)
