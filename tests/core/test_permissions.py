"""Permission Gate — verifies exact-string grants and the route manifest lookups.

Tests:
    - "all" grants everything; otherwise only exact matches grant
    - No role / empty permissions never grants
    - Manifest lookups return the permission, None, or UNLISTED
    - Organization admin default excludes role management
"""

from wms.core.permissions import (
    API_PREFIX, Permission, ROUTE_PERMISSIONS, UNLISTED,
    organization_scoped_permissions, required_permission, role_grants,
)


def test_wildcard_grants_every_permission():
    for permission in Permission:
        assert role_grants(["all"], permission.value)


def test_exact_match_grants():
    assert role_grants(["orders:read"], "orders:read")


def test_no_prefix_or_pattern_matching():
    assert not role_grants(["orders"], "orders:read")
    assert not role_grants(["orders:*"], "orders:read")
    assert not role_grants(["orders:read"], "orders:create")


def test_missing_or_empty_permissions_never_grant():
    assert not role_grants(None, "orders:read")
    assert not role_grants([], "orders:read")


def test_required_permission_for_order_create():
    assert required_permission("POST", f"{API_PREFIX}/orders") is Permission.ORDERS_CREATE


def test_method_lookup_is_case_insensitive():
    assert required_permission("get", f"{API_PREFIX}/orders") is Permission.ORDERS_READ


def test_authenticated_only_reads_map_to_none():
    assert required_permission("GET", f"{API_PREFIX}/items") is None
    assert required_permission("GET", f"{API_PREFIX}/items/{{item_id}}") is None
    assert required_permission("GET", f"{API_PREFIX}/inventory-transactions") is None


def test_unknown_route_is_unlisted():
    assert required_permission("DELETE", f"{API_PREFIX}/items/{{item_id}}") is UNLISTED
    assert required_permission("GET", f"{API_PREFIX}/nowhere") is UNLISTED


def test_no_delete_routes_in_manifest():
    assert all(method != "DELETE" for method, _ in ROUTE_PERMISSIONS)


def test_organization_admin_cannot_manage_roles():
    granted = organization_scoped_permissions()
    assert "roles:create" not in granted
    assert "roles:update" not in granted
    assert "organizations:create" not in granted
    assert "orders:create" in granted
    assert "roles:read" in granted
