"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error response is the {"message": str} envelope

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
