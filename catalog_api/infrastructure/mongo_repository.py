"""Mongo Resource Repository — one collection, one driver call per method.

Invariants:
    - Every public method issues exactly one network call (no retries, no transactions)
    - String identifiers are converted to ObjectId before any call; a malformed id
      raises DatabaseError carrying the driver's own message
    - All driver exceptions (InvalidId, PyMongoError) mapped to DatabaseError (core/errors.py)
    - Returned documents are raw (ObjectId _id intact); rendering is the handler's job

Design Decisions:
    - One generic repository parameterized by collection: Course and Semester
      differ only in name (ADR: no per-resource subclass)
    - Error kinds not distinguished here: connection loss and bad ids both become
      DatabaseError, the boundary maps both to 500
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from catalog_api.core.domain_types import (
    Document, InsertOutcome, Resource, ResourceId,
)
from catalog_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class MongoResourceRepository:
    """ResourceRepository backed by a single MongoDB collection."""

    def __init__(self, collection: AsyncCollection, resource: Resource):
        self._collection = collection
        self._resource = resource

    @property
    def collection_name(self) -> str:
        return self._collection.name

    async def list_all(self) -> list[Document]:
        with self._driver_errors("find"):
            return await self._collection.find().to_list(length=None)

    async def get_by_id(self, resource_id: ResourceId) -> Document | None:
        with self._driver_errors("find_one"):
            return await self._collection.find_one(
                {"_id": ObjectId(resource_id)},
            )

    async def create(self, document: Document) -> InsertOutcome:
        with self._driver_errors("insert_one"):
            result = await self._collection.insert_one(dict(document))
        return InsertOutcome(
            acknowledged=result.acknowledged,
            inserted_id=result.inserted_id,
        )

    async def replace(self, resource_id: ResourceId, document: Document) -> int:
        with self._driver_errors("replace_one"):
            result = await self._collection.replace_one(
                {"_id": ObjectId(resource_id)}, dict(document),
            )
        return result.modified_count

    async def delete(self, resource_id: ResourceId) -> int:
        with self._driver_errors("delete_one"):
            result = await self._collection.delete_one(
                {"_id": ObjectId(resource_id)},
            )
        return result.deleted_count

    @contextmanager
    def _driver_errors(self, operation: str) -> Iterator[None]:
        """Map driver exceptions raised inside the block to DatabaseError."""
        try:
            yield
        except InvalidId as e:
            logger.warning(
                f"Malformed identifier for {self._resource.name}: {e}",
                extra={"resource": self._resource.name, "operation": operation},
            )
            raise DatabaseError(str(e), operation) from e
        except PyMongoError as e:
            logger.error(
                f"DB {operation} failed on '{self.collection_name}': {e}",
                extra={"resource": self._resource.name, "operation": operation},
            )
            raise DatabaseError(str(e), operation) from e
