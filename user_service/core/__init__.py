"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All operations are synchronous

Design Decisions:
    - Functional core separated from imperative shell (ADR: routes stay thin)
"""
