"""Core Layer — pure domain logic, no IO, no async, no web framework.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Validation functions are pure and deterministic; the navigation
      controller only reaches time through an injected Scheduler

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
