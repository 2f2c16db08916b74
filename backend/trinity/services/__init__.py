"""Services Layer — orchestration around the pure core.

Invariants:
    - Services own lifecycles (create, look up, dispose); domain rules stay in core/

Design Decisions:
    - Explicit registry objects injected via app.state, never module-level dicts
      (ADR: independent sessions without cross-talk)
"""
