import os
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

# Keep test runs off any real deployment settings
os.environ.setdefault("LEXIE_LOG_LEVEL", "WARNING")

from lexie_analytics.api.deps import get_store  # noqa: E402
from lexie_analytics.core.errors import AggregationReadFailure, RecordPersistFailure  # noqa: E402
from lexie_analytics.main import app  # noqa: E402


class FakeStore:
    """In-memory store with the same contract as MongoStore"""

    def __init__(self):
        self.collections: Dict[str, List[Dict[str, Any]]] = {}
        self.fail_insert_when = None  # callable(collection, record) -> bool
        self.fail_reads = False

    def insert_one(self, collection: str, record: Dict[str, Any]) -> None:
        if self.fail_insert_when and self.fail_insert_when(collection, record):
            raise RecordPersistFailure("Could not insert record: write rejected")
        self.collections.setdefault(collection, []).append(dict(record))

    def select_rows(self, collection, filters=None, sort=None, limit=None):
        if self.fail_reads:
            raise AggregationReadFailure("Could not read rows: connection refused")
        rows = [
            dict(row) for row in self.collections.get(collection, [])
            if all(row.get(k) == v for k, v in (filters or {}).items())
        ]
        for field, direction in reversed(list(sort or [])):
            rows.sort(key=lambda row: row.get(field), reverse=direction < 0)
        return rows[:limit] if limit else rows

    def count_rows(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        if self.fail_reads:
            raise AggregationReadFailure("Could not count rows: connection refused")
        return len(self.select_rows(collection, filters))

    def rows(self, collection: str) -> List[Dict[str, Any]]:
        return self.collections.get(collection, [])


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
