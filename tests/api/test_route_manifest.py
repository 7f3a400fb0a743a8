"""Route Manifest — every gated route must declare its permission.

Invariants:
    - A route carrying enforce_route_permission and missing from
      ROUTE_PERMISSIONS would be refused for everyone
    - Routes are read from each route module's own APIRouter, so the check
      does not depend on how the application stores included routers
"""

import importlib
import pkgutil

from fastapi.routing import APIRoute

import wms.api.routes
from wms.api.dependencies import enforce_route_permission
from wms.core.permissions import ROUTE_PERMISSIONS


def _routers():
    for info in pkgutil.iter_modules(wms.api.routes.__path__):
        module = importlib.import_module(f"wms.api.routes.{info.name}")
        router = getattr(module, "router", None)
        if router is not None:
            yield router


def _is_gated(dependencies) -> bool:
    return any(d.dependency is enforce_route_permission for d in dependencies)


def _gated_routes():
    for router in _routers():
        router_gated = _is_gated(router.dependencies)
        for route in router.routes:
            if not isinstance(route, APIRoute):
                continue
            if not (router_gated or _is_gated(route.dependencies)):
                continue
            path = route.path
            if not path.startswith(router.prefix):
                path = router.prefix + path
            for method in route.methods:
                yield method, path


def test_gated_routes_are_discovered():
    gated = set(_gated_routes())
    assert ("POST", "/api/v1/orders") in gated
    assert ("GET", "/api/v1/reports/inventory-csv") in gated


def test_every_gated_route_is_in_manifest():
    gated = list(_gated_routes())
    assert gated
    missing = [key for key in gated if key not in ROUTE_PERMISSIONS]
    assert missing == []


def test_manifest_has_no_stale_entries():
    gated = set(_gated_routes())
    assert gated
    assert set(ROUTE_PERMISSIONS) - gated == set()


def test_auth_and_health_are_not_gated():
    gated_paths = {path for _, path in _gated_routes()}
    assert gated_paths
    assert "/api/v1/auth/login" not in gated_paths
    assert "/api/v1/health/" not in gated_paths
