"""
MongoDB Database Manager
Provides the shared MongoDB client and database handle
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from lexie_analytics.core.config import MongoConfig, settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Centralized database connection management"""

    def __init__(self, config: Optional[MongoConfig] = None):
        self.config = config or settings.mongo_config
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None

    @property
    def client(self) -> MongoClient:
        """Get MongoDB client with connection pooling"""
        if self._client is None:
            self._client = MongoClient(**self.config.get_connection_settings())
            logger.info(f"Created MongoDB client for database {self.config.DB}")
        return self._client

    @property
    def db(self) -> Database:
        """Get database instance"""
        if self._db is None:
            self._db = self.client[self.config.DB]
        return self._db

    def close(self):
        """Close database connection"""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("Closed MongoDB connection")


# Global database manager instance
db_manager = DatabaseManager()
