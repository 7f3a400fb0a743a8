"""SQLAlchemy Repositories — async implementations of the core storage protocols.

Invariants:
    - Repositories flush, never commit: the request owns the transaction
    - list() returns rows in id order; None-valued filters are ignored
    - get_many() issues exactly one query per call regardless of id count
    - require() raises ResourceNotFoundError naming the entity type and id

Design Decisions:
    - One generic class parameterized by model; specialized subclasses add the
      lookups the core protocols name (username, SKU, order number, row lock)
    - with_for_update() is a no-op on SQLite and a row lock on PostgreSQL
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wms.core.errors import ResourceNotFoundError
from wms.models import (
    ActivityLog, Bin, BinType, Category, Inventory, InventoryTransaction, Item,
    Order, OrderItem, Organization, Role, Shipment, Supplier, User, Warehouse,
    Zone,
)

ModelT = TypeVar("ModelT")


class SqlAlchemyRepository(Generic[ModelT]):
    """Keyed store for one ORM model."""

    model: type
    resource_name: str

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, entity_id: int) -> ModelT | None:
        return await self.db.get(self.model, entity_id)

    async def require(self, entity_id: int) -> ModelT:
        entity = await self.get(entity_id)
        if entity is None:
            raise ResourceNotFoundError(self.resource_name, entity_id)
        return entity

    async def get_many(self, ids: set[int]) -> dict[int, ModelT]:
        wanted = {i for i in ids if i is not None}
        if not wanted:
            return {}
        result = await self.db.execute(
            select(self.model).where(self.model.id.in_(wanted)),
        )
        return {row.id: row for row in result.scalars().all()}

    async def list(self, **filters: Any) -> list[ModelT]:
        query = select(self.model)
        for column, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, column) == value)
        result = await self.db.execute(query.order_by(self.model.id))
        return list(result.scalars().all())

    async def create(self, **fields: Any) -> ModelT:
        entity = self.model(**fields)
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def update(self, entity: ModelT, changes: dict[str, Any]) -> ModelT:
        for column, value in changes.items():
            setattr(entity, column, value)
        await self.db.flush()
        return entity


class OrganizationRepository(SqlAlchemyRepository[Organization]):
    model = Organization
    resource_name = "Organization"


class RoleRepository(SqlAlchemyRepository[Role]):
    model = Role
    resource_name = "Role"


class UserRepository(SqlAlchemyRepository[User]):
    model = User
    resource_name = "User"

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()


class WarehouseRepository(SqlAlchemyRepository[Warehouse]):
    model = Warehouse
    resource_name = "Warehouse"


class ZoneRepository(SqlAlchemyRepository[Zone]):
    model = Zone
    resource_name = "Zone"


class BinTypeRepository(SqlAlchemyRepository[BinType]):
    model = BinType
    resource_name = "BinType"


class BinRepository(SqlAlchemyRepository[Bin]):
    model = Bin
    resource_name = "Bin"

    async def list_by_warehouse(self, warehouse_id: int) -> list[Bin]:
        result = await self.db.execute(
            select(Bin)
            .join(Zone, Zone.id == Bin.zone_id)
            .where(Zone.warehouse_id == warehouse_id)
            .order_by(Bin.id),
        )
        return list(result.scalars().all())


class CategoryRepository(SqlAlchemyRepository[Category]):
    model = Category
    resource_name = "Category"


class SupplierRepository(SqlAlchemyRepository[Supplier]):
    model = Supplier
    resource_name = "Supplier"


class ItemRepository(SqlAlchemyRepository[Item]):
    model = Item
    resource_name = "Item"

    async def get_by_sku(self, sku: str, organization_id: int) -> Item | None:
        result = await self.db.execute(
            select(Item).where(
                Item.sku == sku, Item.organization_id == organization_id,
            ),
        )
        return result.scalar_one_or_none()


class InventoryRepository(SqlAlchemyRepository[Inventory]):
    model = Inventory
    resource_name = "Inventory"

    async def get_for_update(self, item_id: int, bin_id: int) -> Inventory | None:
        result = await self.db.execute(
            select(Inventory)
            .where(Inventory.item_id == item_id, Inventory.bin_id == bin_id)
            .with_for_update(),
        )
        return result.scalar_one_or_none()

    async def lock(self, inventory_id: int) -> Inventory | None:
        result = await self.db.execute(
            select(Inventory)
            .where(Inventory.id == inventory_id)
            .with_for_update(),
        )
        return result.scalar_one_or_none()


class InventoryTransactionRepository(SqlAlchemyRepository[InventoryTransaction]):
    model = InventoryTransaction
    resource_name = "InventoryTransaction"


class OrderRepository(SqlAlchemyRepository[Order]):
    model = Order
    resource_name = "Order"

    async def get_by_number(
        self, order_number: str, organization_id: int,
    ) -> Order | None:
        result = await self.db.execute(
            select(Order).where(
                Order.order_number == order_number,
                Order.organization_id == organization_id,
            ),
        )
        return result.scalar_one_or_none()


class OrderItemRepository(SqlAlchemyRepository[OrderItem]):
    model = OrderItem
    resource_name = "OrderItem"


class ShipmentRepository(SqlAlchemyRepository[Shipment]):
    model = Shipment
    resource_name = "Shipment"


class ActivityLogRepository(SqlAlchemyRepository[ActivityLog]):
    model = ActivityLog
    resource_name = "ActivityLog"
