"""Route Dependencies — wiring from app.state to repositories, services and validated bodies.

Invariants:
    - The DatabaseManager is read from app.state (set by the lifespan), never imported
    - Write bodies are validated before the handler runs: an invalid body never
      reaches a repository
    - Tests replace get_course_repository / get_semester_repository via
      app.dependency_overrides (no monkey-patching)
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Depends, Request

from catalog_api.config import Settings, get_settings
from catalog_api.core.domain_types import COURSE, SEMESTER
from catalog_api.core.errors import UnexpectedError
from catalog_api.core.repository_protocols import ResourceRepository
from catalog_api.core.validation import validate_payload
from catalog_api.infrastructure.database import DatabaseManager
from catalog_api.infrastructure.mongo_repository import MongoResourceRepository
from catalog_api.schemas.fields import CamelModel
from catalog_api.services.resource_service import ResourceService

M = TypeVar("M", bound=CamelModel)


def get_database(request: Request) -> DatabaseManager:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise UnexpectedError("Database not initialized")
    return database


def get_course_repository(
    database: DatabaseManager = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> ResourceRepository:
    return MongoResourceRepository(
        database.collection(settings.course_collection), COURSE,
    )


def get_semester_repository(
    database: DatabaseManager = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> ResourceRepository:
    return MongoResourceRepository(
        database.collection(settings.semester_collection), SEMESTER,
    )


def get_course_service(
    repository: ResourceRepository = Depends(get_course_repository),
) -> ResourceService:
    return ResourceService(COURSE, repository)


def get_semester_service(
    repository: ResourceRepository = Depends(get_semester_repository),
) -> ResourceService:
    return ResourceService(SEMESTER, repository)


def validated_body(schema: type[M]) -> Callable[[Request], Awaitable[M]]:
    """Dependency factory: parse the JSON body and validate it against schema.

    A missing or non-JSON body is validated as null, which fails with
    '"value" must be of type object'.
    """

    async def read_and_validate(request: Request) -> M:
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        return validate_payload(schema, payload)

    return read_and_validate
