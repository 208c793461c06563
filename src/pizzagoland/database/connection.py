"""
MongoDB connection management
"""

import asyncio
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from pizzagoland.config.settings import (
    MONGO_URI,
    MONGO_DB,
    MONGO_COLLECTION,
    DB_CONNECT_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    """Raised when MongoDB cannot be reached at startup"""


class MongoConnector:
    """Owns the MongoDB client and the users collection handle.

    One connector is created per application and shared by every request.
    The driver client is safe for concurrent use, so no locking happens here.
    """

    def __init__(
        self,
        uri: str = MONGO_URI,
        database_name: str = MONGO_DB,
        collection_name: str = MONGO_COLLECTION,
        connect_timeout: float = DB_CONNECT_TIMEOUT_SECONDS,
    ):
        self.uri = uri
        self.database_name = database_name
        self.collection_name = collection_name
        self.connect_timeout = connect_timeout
        self.client: Optional[AsyncMongoClient] = None
        self._collection = None

    async def connect(self):
        """Create the client and verify connectivity with a ping"""
        if self.client is not None:
            return

        client = AsyncMongoClient(
            self.uri,
            serverSelectionTimeoutMS=int(self.connect_timeout * 1000),
        )

        try:
            await asyncio.wait_for(client.admin.command("ping"), timeout=self.connect_timeout)
        except (PyMongoError, asyncio.TimeoutError) as e:
            await client.close()
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

        self.client = client
        self._collection = client[self.database_name][self.collection_name]
        logger.info("Successfully connected to MongoDB")

    async def close(self):
        """Close the client if it is open"""
        if self.client is not None:
            await self.client.close()
            self.client = None
            self._collection = None
        logger.info("Database connections closed")

    @property
    def collection(self):
        if self._collection is None:
            raise RuntimeError("Database is not connected. Call connect() on startup.")
        return self._collection
