"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - *Create schemas validate the full record; *Update schemas make every field optional
    - Domain enums from core/ used for status and type fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
