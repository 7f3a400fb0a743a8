"""Permission Gate — exact-string role permission checks and the route manifest.

Invariants:
    - role_grants() allows iff "all" in permissions or required in permissions
    - Matching is exact-string only (no prefixes, no patterns, no hierarchy)
    - ROUTE_PERMISSIONS is the single place a protected route declares its permission
    - None in the manifest means "any authenticated principal"
    - A protected route absent from the manifest is denied (see required_permission)

Design Decisions:
    - Manifest keyed by (method, route path template) as registered in FastAPI,
      so coverage gaps show up by reading one dict
"""

from enum import Enum

WILDCARD_PERMISSION = "all"

API_PREFIX = "/api/v1"


class Permission(str, Enum):
    """Every permission string a role may hold (besides the wildcard)."""
    USERS_READ = "users:read"
    USERS_CREATE = "users:create"
    USERS_UPDATE = "users:update"
    ORGANIZATIONS_CREATE = "organizations:create"
    ORGANIZATIONS_UPDATE = "organizations:update"
    ROLES_READ = "roles:read"
    ROLES_CREATE = "roles:create"
    ROLES_UPDATE = "roles:update"
    WAREHOUSES_CREATE = "warehouses:create"
    WAREHOUSES_UPDATE = "warehouses:update"
    INVENTORY_CREATE = "inventory:create"
    INVENTORY_UPDATE = "inventory:update"
    ORDERS_READ = "orders:read"
    ORDERS_CREATE = "orders:create"
    ORDERS_UPDATE = "orders:update"
    SHIPPING_CREATE = "shipping:create"
    SHIPPING_UPDATE = "shipping:update"
    LOGS_READ = "logs:read"
    REPORTS_READ = "reports:read"


class _Unlisted:
    """Sentinel: route has no manifest entry."""

    def __repr__(self) -> str:
        return "UNLISTED"


UNLISTED = _Unlisted()


def role_grants(permissions: list[str] | None, required: str) -> bool:
    """Pure gate: does a role's permission list grant `required`?"""
    if not permissions:
        return False
    return WILDCARD_PERMISSION in permissions or required in permissions


def _crud(
    collection: str,
    id_param: str,
    read: Permission | None,
    create: Permission | None,
    update: Permission | None,
) -> dict[tuple[str, str], Permission | None]:
    base = f"{API_PREFIX}/{collection}"
    item = f"{base}/{{{id_param}}}"
    return {
        ("GET", base): read,
        ("GET", item): read,
        ("POST", base): create,
        ("PATCH", item): update,
    }


P = Permission

ROUTE_PERMISSIONS: dict[tuple[str, str], Permission | None] = {
    **_crud("users", "user_id", P.USERS_READ, P.USERS_CREATE, P.USERS_UPDATE),
    **_crud(
        "organizations", "organization_id",
        None, P.ORGANIZATIONS_CREATE, P.ORGANIZATIONS_UPDATE,
    ),
    **_crud("roles", "role_id", P.ROLES_READ, P.ROLES_CREATE, P.ROLES_UPDATE),
    **_crud(
        "warehouses", "warehouse_id",
        None, P.WAREHOUSES_CREATE, P.WAREHOUSES_UPDATE,
    ),
    **_crud("zones", "zone_id", None, P.WAREHOUSES_CREATE, P.WAREHOUSES_UPDATE),
    **_crud(
        "bin-types", "bin_type_id",
        None, P.WAREHOUSES_CREATE, P.WAREHOUSES_UPDATE,
    ),
    **_crud("bins", "bin_id", None, P.WAREHOUSES_CREATE, P.WAREHOUSES_UPDATE),
    **_crud(
        "categories", "category_id",
        None, P.INVENTORY_CREATE, P.INVENTORY_UPDATE,
    ),
    **_crud(
        "suppliers", "supplier_id",
        None, P.INVENTORY_CREATE, P.INVENTORY_UPDATE,
    ),
    **_crud("items", "item_id", None, P.INVENTORY_CREATE, P.INVENTORY_UPDATE),
    **_crud(
        "inventory", "inventory_id",
        None, P.INVENTORY_CREATE, P.INVENTORY_UPDATE,
    ),
    ("GET", f"{API_PREFIX}/inventory-transactions"): None,
    **_crud("orders", "order_id", P.ORDERS_READ, P.ORDERS_CREATE, P.ORDERS_UPDATE),
    ("GET", f"{API_PREFIX}/order-items"): P.ORDERS_READ,
    ("GET", f"{API_PREFIX}/order-items/{{order_item_id}}"): P.ORDERS_READ,
    ("PATCH", f"{API_PREFIX}/order-items/{{order_item_id}}"): P.ORDERS_UPDATE,
    **_crud(
        "shipments", "shipment_id",
        None, P.SHIPPING_CREATE, P.SHIPPING_UPDATE,
    ),
    ("GET", f"{API_PREFIX}/activity-logs"): P.LOGS_READ,
    ("GET", f"{API_PREFIX}/reports/inventory-csv"): P.REPORTS_READ,
    ("GET", f"{API_PREFIX}/reports/low-stock"): P.REPORTS_READ,
    ("GET", f"{API_PREFIX}/reports/order-status-summary"): P.REPORTS_READ,
}


def required_permission(method: str, path: str) -> Permission | None | _Unlisted:
    """Look up a route in the manifest. Returns UNLISTED when absent."""
    return ROUTE_PERMISSIONS.get((method.upper(), path), UNLISTED)


def organization_scoped_permissions() -> list[str]:
    """Every permission except role management; the default org-admin grant."""
    return [
        p.value for p in Permission
        if p not in (P.ROLES_CREATE, P.ROLES_UPDATE, P.ORGANIZATIONS_CREATE)
    ]
