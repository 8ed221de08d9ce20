"""
Record store used by ingestion and reporting

`EventStore` is the capability contract the services depend on;
`MongoStore` implements it over a pymongo database.
"""
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database

from lexie_analytics.core.decorators import handle_db_errors
from lexie_analytics.core.errors import AggregationReadFailure, RecordPersistFailure

SortSpec = Sequence[Tuple[str, int]]

__all__ = ["EventStore", "MongoStore", "SortSpec", "ASCENDING", "DESCENDING"]


class EventStore(Protocol):
    def insert_one(self, collection: str, record: Dict[str, Any]) -> None:
        ...

    def select_rows(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        ...

    def count_rows(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        ...


class MongoStore:
    """
    Store backed by MongoDB collections
    """

    def __init__(self, db: Database):
        self.db = db

    @handle_db_errors(RecordPersistFailure, "insert record")
    def insert_one(self, collection: str, record: Dict[str, Any]) -> None:
        """Insert a single record; raises RecordPersistFailure on error"""
        # insert_one adds _id to the dict it is given
        self.db[collection].insert_one(dict(record))

    @handle_db_errors(AggregationReadFailure, "read rows")
    def select_rows(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Find documents by query, without the Mongo `_id`"""
        cursor = self.db[collection].find(filters or {}, {"_id": 0})
        if sort:
            cursor = cursor.sort(list(sort))
        if limit:
            cursor = cursor.limit(int(limit))
        return list(cursor)

    @handle_db_errors(AggregationReadFailure, "count rows")
    def count_rows(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching query"""
        return self.db[collection].count_documents(filters or {})
