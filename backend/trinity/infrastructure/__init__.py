"""Infrastructure Layer — runtime adapters and cross-cutting concerns.

Invariants:
    - Implements core/ protocols (Scheduler); never holds domain logic itself

Design Decisions:
    - Thin adapters over the asyncio loop and stdlib logging (ADR: ExMA single responsibility)
"""
