"""Boundary Protocols — contract between the request handlers and persistence.

Invariants:
    - Handlers depend on ResourceRepository only, never on the driver
    - Each method performs exactly one database call
    - Malformed identifiers raise (DatabaseError), they never return None/0

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
      (ADR: injected repository instead of a global connection handle)
"""

from typing import Protocol

from catalog_api.core.domain_types import Document, InsertOutcome, ResourceId


class ResourceRepository(Protocol):
    """Contract for one collection's persistence — implemented by infrastructure."""
    async def list_all(self) -> list[Document]: ...
    async def get_by_id(self, resource_id: ResourceId) -> Document | None: ...
    async def create(self, document: Document) -> InsertOutcome: ...
    async def replace(
        self, resource_id: ResourceId, document: Document,
    ) -> int: ...
    async def delete(self, resource_id: ResourceId) -> int: ...
