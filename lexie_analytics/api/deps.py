"""
API Dependencies
"""
from lexie_analytics.core.database import db_manager
from lexie_analytics.repositories.store import EventStore, MongoStore


def get_store() -> EventStore:
    """Get the record store for the request"""
    return MongoStore(db_manager.db)
