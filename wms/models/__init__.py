"""ORM Models — SQLAlchemy declarative models for all warehouse entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer autoincrement primary keys on every table
    - Organization is the tenant root; warehouses, items, orders scoped by organization_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references and Base.metadata is complete before create_all / autogenerate
"""

from wms.models.organization import Organization  # noqa: F401
from wms.models.role import Role  # noqa: F401
from wms.models.user import User  # noqa: F401
from wms.models.user_session import UserSession  # noqa: F401
from wms.models.warehouse import Warehouse  # noqa: F401
from wms.models.zone import Zone  # noqa: F401
from wms.models.bin_type import BinType  # noqa: F401
from wms.models.bin import Bin  # noqa: F401
from wms.models.category import Category  # noqa: F401
from wms.models.supplier import Supplier  # noqa: F401
from wms.models.item import Item  # noqa: F401
from wms.models.inventory import Inventory  # noqa: F401
from wms.models.inventory_transaction import InventoryTransaction  # noqa: F401
from wms.models.order import Order  # noqa: F401
from wms.models.order_item import OrderItem  # noqa: F401
from wms.models.shipment import Shipment  # noqa: F401
from wms.models.activity_log import ActivityLog  # noqa: F401
