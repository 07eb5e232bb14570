"""In-Memory Repository — ResourceRepository test double with MongoDB-like semantics.

Invariants:
    - Identifiers are real ObjectIds; malformed ids raise DatabaseError exactly like
      the Mongo repository (driver text preserved)
    - replace() reports 0 modified when the new document equals the stored one
      (MongoDB's modified_count behavior)
    - Every call is appended to .calls so tests can assert "no database call made"

Design Decisions:
    - Structural fake (no inheritance from the Protocol): the service only needs
      the five async methods
    - fail_with / acknowledge knobs instead of subclasses: one fake covers the
      error-path tests too
"""

from bson import ObjectId
from bson.errors import InvalidId

from catalog_api.core.domain_types import InsertOutcome
from catalog_api.core.errors import DatabaseError


class InMemoryRepository:
    """Dict-backed repository preserving insertion order."""

    def __init__(self):
        self.documents: dict[ObjectId, dict] = {}
        self.calls: list[str] = []
        self.acknowledge = True
        self.fail_with: Exception | None = None

    def seed(self, document: dict) -> str:
        """Insert directly (no call recorded). Returns the hex id."""
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, **document}
        return str(oid)

    async def list_all(self) -> list[dict]:
        self._record("list_all")
        return [dict(d) for d in self.documents.values()]

    async def get_by_id(self, resource_id: str) -> dict | None:
        self._record("get_by_id")
        doc = self.documents.get(self._oid(resource_id, "find_one"))
        return dict(doc) if doc else None

    async def create(self, document: dict) -> InsertOutcome:
        self._record("create")
        if not self.acknowledge:
            return InsertOutcome(acknowledged=False)
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, **document}
        return InsertOutcome(acknowledged=True, inserted_id=oid)

    async def replace(self, resource_id: str, document: dict) -> int:
        self._record("replace")
        oid = self._oid(resource_id, "replace_one")
        current = self.documents.get(oid)
        if current is None:
            return 0
        replacement = {"_id": oid, **document}
        if replacement == current:
            return 0
        self.documents[oid] = replacement
        return 1

    async def delete(self, resource_id: str) -> int:
        self._record("delete")
        oid = self._oid(resource_id, "delete_one")
        return 1 if self.documents.pop(oid, None) is not None else 0

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    @staticmethod
    def _oid(resource_id: str, operation: str) -> ObjectId:
        try:
            return ObjectId(resource_id)
        except InvalidId as e:
            raise DatabaseError(str(e), operation) from e
