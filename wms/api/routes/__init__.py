"""Route Modules — one file per resource group.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Protected routers carry the enforce_route_permission dependency
"""
