"""Boundary Protocols — storage contracts between core workflows and the database shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every entity store exposes get / require / get_many / list / create / update
    - get_many() is the only way to resolve related records for a result set
    - No delete operation exists on any repository
    - require() raises ResourceNotFoundError instead of returning None

Design Decisions:
    - Protocol over ABC: structural subtyping, services depend on the contract and
      tests may pass any object with the same methods
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class EntityRepository(Protocol[T]):
    """Keyed store for one entity type."""
    async def get(self, entity_id: int) -> T | None: ...
    async def require(self, entity_id: int) -> T: ...
    async def get_many(self, ids: set[int]) -> dict[int, T]: ...
    async def list(self, **filters: Any) -> list[T]: ...
    async def create(self, **fields: Any) -> T: ...
    async def update(self, entity: T, changes: dict[str, Any]) -> T: ...


class UserStore(EntityRepository[T], Protocol[T]):
    async def get_by_username(self, username: str) -> T | None: ...


class ItemStore(EntityRepository[T], Protocol[T]):
    async def get_by_sku(self, sku: str, organization_id: int) -> T | None: ...


class OrderStore(EntityRepository[T], Protocol[T]):
    async def get_by_number(self, order_number: str, organization_id: int) -> T | None: ...


class InventoryStore(EntityRepository[T], Protocol[T]):
    async def get_for_update(self, item_id: int, bin_id: int) -> T | None: ...
    async def lock(self, inventory_id: int) -> T | None: ...


class BinStore(EntityRepository[T], Protocol[T]):
    async def list_by_warehouse(self, warehouse_id: int) -> list[T]: ...
