"""
Database error handling decorators
"""
import functools
import logging
from typing import Callable, Type

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from lexie_analytics.core.errors import StoreError

logger = logging.getLogger(__name__)

# Encoding a document to BSON raises outside the PyMongoError hierarchy
DRIVER_ERRORS = (PyMongoError, BSONError, OverflowError)


def handle_db_errors(error_cls: Type[StoreError], action: str) -> Callable:
    """
    Translate driver and BSON encoding errors raised by a store call into `error_cls`
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DRIVER_ERRORS as e:
                logger.error(f"Database error during {action}: {type(e).__name__}: {str(e)}")
                raise error_cls(
                    message=f"Could not {action}: {str(e)}",
                    details={"original_error": str(e)}
                ) from e
        return wrapper
    return decorator
