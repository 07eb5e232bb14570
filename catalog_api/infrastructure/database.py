"""Database Manager — one async MongoDB client per process, opened in the lifespan.

Invariants:
    - Exactly one AsyncMongoClient per process, created before requests are served
    - The manager lives on app.state, never in a module-level global
    - Closing the manager closes the client (shutdown only)

Design Decisions:
    - pymongo's native async client over a thread-pool wrapper (ADR: event loop
      never blocks on the driver)
    - No pool sizing exposed: driver defaults are the contract
"""

import logging

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "catalog"


class DatabaseManager:
    """Owns the client and the selected database."""

    def __init__(
        self,
        uri: str,
        database_name: str | None = None,
        client: AsyncMongoClient | None = None,
    ):
        self.client = client if client is not None else AsyncMongoClient(uri)
        if database_name:
            self.db = self.client[database_name]
        else:
            self.db = self.client.get_default_database(default=DEFAULT_DATABASE)

    def collection(self, name: str) -> AsyncCollection:
        return self.db[name]

    async def health_check(self) -> bool:
        """Ping the server (for readiness probes)."""
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.close()


def init_db(uri: str, database_name: str | None = None) -> DatabaseManager:
    manager = DatabaseManager(uri, database_name)
    logger.info(f"Database handle created for '{manager.db.name}'")
    return manager
