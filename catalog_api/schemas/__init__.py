"""Pydantic Schemas — request validation for API write endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies only)
    - Stored documents are produced by to_document(), never from raw bodies

Design Decisions:
    - No response models: documents are returned as stored (ADR: full-replace
      semantics mean the stored shape IS the request shape plus _id)
"""
