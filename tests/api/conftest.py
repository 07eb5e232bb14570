"""API test fixtures — FastAPI test client over in-memory repositories.

Invariants:
    - Every test gets fresh, empty course and semester repositories
    - Repository dependencies overridden via app.dependency_overrides (no patching)
    - Overrides cleared after each test

Design Decisions:
    - Lifespan not run by ASGITransport: no MongoDB client is ever created in these tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_api.api.dependencies import (
    get_course_repository, get_semester_repository,
)
from catalog_api.main import app
from tests.fake_repository import InMemoryRepository


@pytest.fixture
def course_repo():
    return InMemoryRepository()


@pytest.fixture
def semester_repo():
    return InMemoryRepository()


@pytest.fixture
async def client(course_repo, semester_repo):
    """FastAPI test client with repositories overridden."""
    app.dependency_overrides[get_course_repository] = lambda: course_repo
    app.dependency_overrides[get_semester_repository] = lambda: semester_repo

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def bare_client():
    """Client with no overrides and no database on app.state."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
