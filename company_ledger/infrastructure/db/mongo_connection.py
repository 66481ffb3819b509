"""
MongoDB Client
==============

MongoDB client manager for database connections.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from company_ledger.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    The connection is opened lazily or explicitly via open(), and released by close().
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

    def open(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        if not self._settings.mongo_uri:
            raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")

        db_name = self._settings.mongo_database_name
        # tz_aware so stored datetimes come back comparable with now()
        self._client = MongoClient(self._settings.mongo_uri, tz_aware=True)
        self._database = self._client[db_name]
        logger.info("Connected to MongoDB: %s", db_name)

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self.open()
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
