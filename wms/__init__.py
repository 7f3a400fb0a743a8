"""WMS Application Package — multi-tenant warehouse management API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
