"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (already-parsed specification records, navigation commands)
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from core records: schemas are API contracts, core dataclasses are domain (ADR: DDD boundary)
"""
