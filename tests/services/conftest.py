"""Service test fixtures — ResourceService over an in-memory repository.

Invariants:
    - Every test gets a fresh repository
    - Services constructed directly (no FastAPI app involved)
"""

import pytest

from catalog_api.core.domain_types import COURSE
from catalog_api.services.resource_service import ResourceService
from tests.fake_repository import InMemoryRepository


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def course_service(repository):
    return ResourceService(COURSE, repository)
