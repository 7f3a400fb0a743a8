"""Status Transitions — verifies order, order-line and shipment state machines.

Tests:
    - Legal moves pass and report whether the status changed
    - Same-status updates are no-ops
    - Illegal moves raise InvalidStatusTransitionError (409)
    - Terminal states have no outgoing edges
"""

import pytest

from wms.core.domain_types import OrderStatus, ShipmentStatus
from wms.core.errors import InvalidStatusTransitionError
from wms.core.status_transitions import (
    ORDER_TRANSITIONS, allowed_targets, check_transition, is_allowed,
)


def test_pending_order_can_start_processing():
    assert check_transition("order", "pending", "processing") is True


def test_same_status_is_a_noop():
    assert check_transition("order", "packed", "packed") is False


def test_canceled_order_cannot_return_to_pending():
    with pytest.raises(InvalidStatusTransitionError) as exc_info:
        check_transition("order", "canceled", "pending")
    assert exc_info.value.http_status == 409
    assert exc_info.value.current == "canceled"
    assert exc_info.value.target == "pending"


def test_accepts_enum_members():
    assert check_transition("order", OrderStatus.PACKED, OrderStatus.SHIPPED)


def test_terminal_order_states_have_no_exits():
    assert ORDER_TRANSITIONS[OrderStatus.DELIVERED] == frozenset()
    assert ORDER_TRANSITIONS[OrderStatus.CANCELED] == frozenset()


def test_order_cannot_skip_to_delivered():
    assert not is_allowed("order", "pending", "delivered")


def test_order_line_cannot_leave_packed():
    with pytest.raises(InvalidStatusTransitionError):
        check_transition("order_item", "packed", "picked")


def test_order_line_allocation_can_be_released():
    assert is_allowed("order_item", "allocated", "pending")


def test_shipment_label_then_ship_then_deliver():
    assert check_transition("shipment", "pending", "label_created")
    assert check_transition("shipment", "label_created", "shipped")
    assert check_transition("shipment", "shipped", "delivered")


def test_delivered_shipment_cannot_be_canceled():
    assert not is_allowed(
        "shipment", ShipmentStatus.DELIVERED, ShipmentStatus.CANCELED,
    )


def test_allowed_targets_sorted():
    assert allowed_targets("order", "packed") == ["canceled", "shipped"]


def test_unknown_status_value_rejected():
    with pytest.raises(ValueError):
        check_transition("order", "pending", "teleported")


def test_error_lists_legal_targets():
    with pytest.raises(InvalidStatusTransitionError) as exc_info:
        check_transition("order", "packed", "pending")
    assert exc_info.value.allowed == ["canceled", "shipped"]
    assert "allowed: canceled, shipped" in exc_info.value.message
