"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Field bounds come from core/domain_types

Design Decisions:
    - Separate from core entities: schemas are API contracts, dataclasses are domain state
"""
