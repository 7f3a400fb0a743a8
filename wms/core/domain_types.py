"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - All valid states encoded as Enums; no raw string matching
    - Statuses start in PENDING for orders, order items and shipments

Design Decisions:
    - str Enums: serialize to JSON without custom encoders and compare equal to DB strings
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class RoleScope(str, Enum):
    """Tier a role's permissions apply within."""
    GLOBAL = "global"
    ORGANIZATION = "organization"
    CUSTOMER = "customer"


class OrderStatus(str, Enum):
    """Order lifecycle; transitions in core/status_transitions.py."""
    PENDING = "pending"
    PROCESSING = "processing"
    ALLOCATED = "allocated"
    PACKED = "packed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELED = "canceled"


class OrderItemStatus(str, Enum):
    """Order line lifecycle."""
    PENDING = "pending"
    ALLOCATED = "allocated"
    PICKED = "picked"
    PACKED = "packed"
    CANCELED = "canceled"


class ShipmentStatus(str, Enum):
    """Shipment lifecycle."""
    PENDING = "pending"
    LABEL_CREATED = "label_created"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELED = "canceled"


class TransactionType(str, Enum):
    """Inventory ledger entry kinds. Quantity sign carries direction."""
    RECEIVING = "receiving"
    PICKING = "picking"
    ADJUSTMENT = "adjustment"
    RETURN = "return"
    TRANSFER = "transfer"


class AuditAction(str, Enum):
    """Action verbs written to the activity log."""
    CREATE = "create"
    UPDATE = "update"
    STATUS_CHANGE = "status_change"


class EntityType(str, Enum):
    """Entity type tags written to the activity log."""
    USER = "user"
    ORGANIZATION = "organization"
    ROLE = "role"
    WAREHOUSE = "warehouse"
    ZONE = "zone"
    BIN_TYPE = "bin_type"
    BIN = "bin"
    CATEGORY = "category"
    SUPPLIER = "supplier"
    ITEM = "item"
    INVENTORY = "inventory"
    ORDER = "order"
    ORDER_ITEM = "order_item"
    SHIPMENT = "shipment"
