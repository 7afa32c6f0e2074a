"""Pydantic Schemas - validation of matching problems at the library boundary.

Invariants:
    - Schemas validate at system boundary (JSON-like input, serialized results)
    - Enum fields use domain types from core/

Design Decisions:
    - Separate from core: schemas are data contracts, core works on plain dicts and sets
"""
