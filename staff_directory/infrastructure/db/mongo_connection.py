"""
MongoDB Connection
==================

Long-lived MongoDB client shared by all repositories.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB connection holder.

    Created once at startup and injected into repositories. The
    underlying MongoClient keeps its own thread-safe connection pool,
    so one instance serves every concurrent request.
    """

    def __init__(self, database_url: str, database_name: str) -> None:
        self._database_url = database_url
        self._database_name = database_name
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    def connect(self) -> "MongoConnection":
        """
        Open the client and verify the server is reachable.

        Returns:
            This connection, for chaining

        Raises:
            RuntimeError: If the URL is invalid or the server does not answer a ping
        """
        if self._client is not None:
            return self

        client = None
        try:
            client = MongoClient(self._database_url)
            client.admin.command("ping")
        except (PyMongoError, ValueError) as exc:
            if client is not None:
                client.close()
            raise RuntimeError("Failed to connect to MongoDB") from exc

        self._client = client
        self._database = client[self._database_name]
        logger.info("Connected to MongoDB database '%s'", self._database_name)
        return self

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self.connect()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.get_database()[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")
