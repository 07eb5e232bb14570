"""Resource Service — the request handlers: repository call, then result mapping.

Invariants:
    - One repository call per operation; no state kept between calls
    - Result mapping is identical for every resource:
        get      → document | ResourceNotFoundError
        create   → insert result | OperationFailedError (not acknowledged)
        replace  → None | ResourceNotFoundError (modified count 0)
        delete   → {"message"} | ResourceNotFoundError (deleted count 0)
    - Nothing escapes untyped: any non-CatalogError becomes UnexpectedError with the
      error's own text, or the operation's fallback phrase when it has none
    - A textless UnexpectedError from below (e.g. DatabaseError("")) is re-raised
      with the operation's fallback phrase
    - Every 500-class failure is logged here, once, with traceback

Design Decisions:
    - Handlers raise, the API layer translates (ADR: single boundary translator,
      see api/error_handlers.py)
    - Documents rendered with jsonable_encoder + ObjectId→str: the stored shape is
      returned as-is, only identifiers change representation
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from bson import ObjectId
from fastapi.encoders import jsonable_encoder

from catalog_api.core.domain_types import (
    Document, Operation, Resource, ResourceId,
)
from catalog_api.core.errors import (
    CatalogError, OperationFailedError, ResourceNotFoundError,
    UnexpectedError,
)
from catalog_api.core.repository_protocols import ResourceRepository
from catalog_api.schemas.fields import CamelModel

logger = logging.getLogger(__name__)


def render_document(document: Document) -> dict[str, Any]:
    """Stored document → JSON-safe dict (_id as hex string)."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


class ResourceService:
    """List/get/create/replace/delete for one resource type."""

    def __init__(self, resource: Resource, repository: ResourceRepository):
        self.resource = resource
        self.repository = repository

    async def list_all(self) -> list[dict[str, Any]]:
        with self._handling(Operation.LIST):
            documents = await self.repository.list_all()
        return [render_document(d) for d in documents]

    async def get(self, resource_id: ResourceId) -> dict[str, Any]:
        with self._handling(Operation.GET, resource_id):
            document = await self.repository.get_by_id(resource_id)
        if document is None:
            raise ResourceNotFoundError(self.resource.name, resource_id)
        return render_document(document)

    async def create(self, payload: CamelModel) -> dict[str, Any]:
        with self._handling(Operation.CREATE):
            outcome = await self.repository.create(payload.to_document())
        if not outcome.acknowledged:
            raise OperationFailedError(self.resource.create_failed_message)
        logger.info(
            f"Created {self.resource.name} {outcome.inserted_id}",
            extra={"resource": self.resource.name},
        )
        return outcome.to_response()

    async def replace(self, resource_id: ResourceId, payload: CamelModel) -> None:
        with self._handling(Operation.REPLACE, resource_id):
            modified = await self.repository.replace(
                resource_id, payload.to_document(),
            )
        if modified == 0:
            raise ResourceNotFoundError(self.resource.name, resource_id)

    async def delete(self, resource_id: ResourceId) -> dict[str, str]:
        with self._handling(Operation.DELETE, resource_id):
            deleted = await self.repository.delete(resource_id)
        if deleted == 0:
            raise ResourceNotFoundError(self.resource.name, resource_id)
        logger.info(
            f"Deleted {self.resource.name} {resource_id}",
            extra={"resource": self.resource.name, "resource_id": resource_id},
        )
        return {"message": self.resource.deleted_message}

    @contextmanager
    def _handling(
        self, operation: Operation, resource_id: ResourceId | None = None,
    ) -> Iterator[None]:
        """Log and type every failure raised by the repository call."""
        try:
            yield
        except UnexpectedError as e:
            self._log_failure(operation, e, resource_id)
            if not e.detail:
                raise UnexpectedError(
                    fallback=self.resource.fallback_message(operation),
                ) from e
            raise
        except CatalogError:
            raise
        except Exception as e:
            self._log_failure(operation, e, resource_id)
            raise UnexpectedError(
                str(e), fallback=self.resource.fallback_message(operation),
            ) from e

    def _log_failure(
        self, operation: Operation, exc: Exception, resource_id: ResourceId | None,
    ) -> None:
        logger.error(
            f"{self.resource.name} {operation.value} failed: {exc}",
            exc_info=True,
            extra={
                "resource": self.resource.name,
                "resource_id": resource_id,
                "operation": operation.value,
            },
        )
