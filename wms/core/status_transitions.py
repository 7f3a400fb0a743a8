"""Status Transitions — explicit state machines for orders, order items, shipments.

Invariants:
    - One transition table per entity kind; all checks go through check_transition()
    - Same-status "transitions" are no-ops and always allowed
    - Terminal states (delivered, canceled, packed for lines) have no outgoing edges
    - Pure: no IO, raises InvalidStatusTransitionError on violation

Design Decisions:
    - Tables as dict[Enum, frozenset[Enum]]: legal moves are readable at a glance
"""

from enum import Enum

from wms.core.domain_types import OrderStatus, OrderItemStatus, ShipmentStatus
from wms.core.errors import InvalidStatusTransitionError

ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({
        OrderStatus.PROCESSING,
        OrderStatus.ALLOCATED,
        OrderStatus.CANCELED,
    }),
    OrderStatus.PROCESSING: frozenset({
        OrderStatus.ALLOCATED,
        OrderStatus.PACKED,
        OrderStatus.SHIPPED,
        OrderStatus.CANCELED,
    }),
    OrderStatus.ALLOCATED: frozenset({
        OrderStatus.PROCESSING,
        OrderStatus.PACKED,
        OrderStatus.SHIPPED,
        OrderStatus.CANCELED,
    }),
    OrderStatus.PACKED: frozenset({
        OrderStatus.SHIPPED,
        OrderStatus.CANCELED,
    }),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELED: frozenset(),
}

ORDER_ITEM_TRANSITIONS: dict[OrderItemStatus, frozenset[OrderItemStatus]] = {
    OrderItemStatus.PENDING: frozenset({
        OrderItemStatus.ALLOCATED,
        OrderItemStatus.CANCELED,
    }),
    OrderItemStatus.ALLOCATED: frozenset({
        OrderItemStatus.PENDING,
        OrderItemStatus.PICKED,
        OrderItemStatus.CANCELED,
    }),
    OrderItemStatus.PICKED: frozenset({OrderItemStatus.PACKED}),
    OrderItemStatus.PACKED: frozenset(),
    OrderItemStatus.CANCELED: frozenset(),
}

SHIPMENT_TRANSITIONS: dict[ShipmentStatus, frozenset[ShipmentStatus]] = {
    ShipmentStatus.PENDING: frozenset({
        ShipmentStatus.LABEL_CREATED,
        ShipmentStatus.SHIPPED,
        ShipmentStatus.CANCELED,
    }),
    ShipmentStatus.LABEL_CREATED: frozenset({
        ShipmentStatus.SHIPPED,
        ShipmentStatus.CANCELED,
    }),
    ShipmentStatus.SHIPPED: frozenset({ShipmentStatus.DELIVERED}),
    ShipmentStatus.DELIVERED: frozenset(),
    ShipmentStatus.CANCELED: frozenset(),
}

_TABLES: dict[str, tuple[type[Enum], dict]] = {
    "order": (OrderStatus, ORDER_TRANSITIONS),
    "order_item": (OrderItemStatus, ORDER_ITEM_TRANSITIONS),
    "shipment": (ShipmentStatus, SHIPMENT_TRANSITIONS),
}


def is_allowed(kind: str, current: str, target: str) -> bool:
    """True when `current -> target` is legal for the entity kind."""
    enum_cls, table = _TABLES[kind]
    current_state = enum_cls(current)
    target_state = enum_cls(target)
    if current_state == target_state:
        return True
    return target_state in table[current_state]


def check_transition(kind: str, current: str, target: str) -> bool:
    """Validate a status change. Returns True when the status actually changes.

    Raises InvalidStatusTransitionError for illegal moves.
    """
    enum_cls = _TABLES[kind][0]
    current_state, target_state = enum_cls(current), enum_cls(target)
    if not is_allowed(kind, current_state, target_state):
        raise InvalidStatusTransitionError(
            kind, current_state.value, target_state.value,
            allowed=allowed_targets(kind, current_state),
        )
    return current_state != target_state


def allowed_targets(kind: str, current: str) -> list[str]:
    """Legal next statuses, sorted, for error hints and UI menus."""
    enum_cls, table = _TABLES[kind]
    return sorted(s.value for s in table[enum_cls(current)])
