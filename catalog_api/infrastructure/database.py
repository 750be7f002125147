"""MongoDB connection management.

Provides the process-wide client handle shared by all requests.
"""

from typing import Any

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from catalog_api.domain.exceptions import StoreUnavailableError
from catalog_api.infrastructure.config import settings

logger = structlog.get_logger()


class StoreConnection:
    """Handle on the MongoDB client.

    The client is created lazily on first use so that constructing the
    handle never performs I/O. Without a connection string the handle
    stays disconnected and every collection access raises
    StoreUnavailableError.
    """

    def __init__(
        self,
        uri: str | None,
        database_name: str,
        timeout_ms: int = 2000,
    ) -> None:
        """Initialize connection handle.

        Args:
            uri: MongoDB connection string, or None when not configured.
            database_name: Database holding the catalog collections.
            timeout_ms: Server selection timeout in milliseconds.
        """
        self.uri = uri
        self.database_name = database_name
        self.timeout_ms = timeout_ms
        self._client: AsyncMongoClient | None = None

    @property
    def configured(self) -> bool:
        """Whether a connection string was supplied."""
        return bool(self.uri)

    def _get_client(self) -> AsyncMongoClient:
        if not self.configured:
            raise StoreUnavailableError("MONGODB_URI is not configured")
        if self._client is None:
            self._client = AsyncMongoClient(
                self.uri,
                serverSelectionTimeoutMS=self.timeout_ms,
                tz_aware=True,
            )
        return self._client

    def get_collection(self, name: str) -> AsyncCollection[dict[str, Any]]:
        """Get a collection from the catalog database.

        Args:
            name: Collection name.

        Returns:
            Async collection handle.

        Raises:
            StoreUnavailableError: If no connection string is configured.
        """
        return self._get_client()[self.database_name][name]

    async def ping(self) -> bool:
        """Check live connectivity.

        Returns:
            True if the server answered a ping, False otherwise.
        """
        if not self.configured:
            return False
        try:
            await self._get_client().admin.command("ping")
        except PyMongoError as e:
            logger.debug("MongoDB ping failed", error=str(e))
            return False
        return True

    async def close(self) -> None:
        """Close the underlying client if it was opened."""
        if self._client is not None:
            await self._client.close()
            self._client = None


# ============================================================================
# Singleton
# ============================================================================


_connection: StoreConnection | None = None


def get_store_connection() -> StoreConnection:
    """Get store connection singleton."""
    global _connection
    if _connection is None:
        _connection = StoreConnection(
            uri=settings.mongodb_uri,
            database_name=settings.database_name,
            timeout_ms=settings.mongodb_timeout_ms,
        )
    return _connection


async def close_store_connection() -> None:
    """Close and forget the store connection singleton."""
    global _connection
    if _connection is not None:
        await _connection.close()
        _connection = None
