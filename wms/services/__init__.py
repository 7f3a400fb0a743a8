"""Services Layer — repositories, audit writer, and entity workflows.

Invariants:
    - Services receive an AsyncSession; they flush but never commit
    - Route handlers own the commit (one commit per mutating request)

Design Decisions:
    - One service module per workflow (inventory, orders, shipments) for locality
"""
