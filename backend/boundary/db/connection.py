"""
Database connection management.

Provides the MongoDB gateway that owns the motor client for the lifetime of
the process and hands out named-collection accessors.

Dependencies: motor, pymongo, backend.configs
System role: Database connection lifecycle management
"""

import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from backend.configs.database import DatabaseSettings
from backend.core.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


class MongoGateway:
    """
    Shared handle to a MongoDB database.

    One instance is created per application and reused by every request.
    Concurrent writes to the same document are serialized by MongoDB itself.

    Usage:
        gateway = MongoGateway(uri, "sctp02_University")
        await gateway.connect()
        courses = gateway.collection("course")
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
    ) -> None:
        """
        Args:
            uri: MongoDB connection string
            db_name: Logical database name
            server_selection_timeout_ms: Startup wait for a reachable server
        """
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: AsyncIOMotorClient | None = None
        self._db: AsyncIOMotorDatabase | None = None

    @classmethod
    def from_settings(cls, settings: DatabaseSettings) -> "MongoGateway":
        """Build a gateway from database settings."""
        return cls(
            uri=settings.uri,
            db_name=settings.db_name,
            server_selection_timeout_ms=settings.server_selection_timeout_ms,
        )

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> None:
        """
        Open the client and verify the server answers a ping.

        Raises:
            DatabaseConnectionError: If the server cannot be reached
        """
        client = AsyncIOMotorClient(
            self.uri,
            serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            # Stored datetimes come back as UTC-aware values
            tz_aware=True,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            logger.error(
                "Failed to connect to MongoDB",
                extra={"db_name": self.db_name, "error": str(e)},
            )
            raise DatabaseConnectionError(
                "Could not connect to MongoDB",
                details={"db_name": self.db_name, "error": str(e)},
            ) from e

        self._client = client
        self._db = client[self.db_name]
        logger.info("Connected to MongoDB", extra={"db_name": self.db_name})

    def collection(self, name: str) -> AsyncIOMotorCollection:
        """
        Get a named collection accessor.

        Args:
            name: Collection name

        Returns:
            AsyncIOMotorCollection: Collection handle

        Raises:
            RuntimeError: If connect() has not completed
        """
        if self._db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._db[name]

    async def ping(self) -> bool:
        """Return True if the server answers a ping."""
        if self._client is None:
            return False
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB ping failed", extra={"error": str(e)})
            return False
        return True

    def close(self) -> None:
        """Close the client. Motor's close() is not async."""
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed", extra={"db_name": self.db_name})
        self._client = None
        self._db = None
