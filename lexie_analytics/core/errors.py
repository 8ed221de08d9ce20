"""
Application error types

Request-level errors (`InvalidInput`, `AggregationReadFailure`) surface to the
HTTP caller through the error handlers in `middleware`. Record-level errors
(`RecordPersistFailure`, `MalformedMetricInput`) stay local to the record
that caused them.
"""
from typing import Any, Dict, Optional


class APIError(Exception):
    """Base error carrying an HTTP status and a client-facing message"""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error_code, "message": self.message}


class InvalidInput(APIError):
    """Malformed ingestion request"""

    status_code = 400
    error_code = "INVALID_INPUT"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class StoreError(APIError):
    """A store call failed"""

    error_code = "STORE_ERROR"


class RecordPersistFailure(StoreError):
    """A single record could not be written"""

    error_code = "RECORD_PERSIST_FAILURE"


class AggregationReadFailure(StoreError):
    """A store read needed for a report failed"""

    error_code = "AGGREGATION_READ_FAILURE"


class MalformedMetricInput(ValueError):
    """A numeric field inside a row could not be parsed"""
