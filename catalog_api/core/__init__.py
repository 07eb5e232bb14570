"""Core Layer — pure domain logic, no IO, no async work, no driver imports.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Validation and message phrasing are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
