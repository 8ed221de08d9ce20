import logging

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database

from lexie_analytics.core.config import settings

logger = logging.getLogger(__name__)


def ensure_indexes(db: Database):
    events = db[settings.ANALYTICS_COLLECTION]
    events.create_index([("type", ASCENDING)], name="type")
    events.create_index([("user_id", ASCENDING)], name="user_id")
    events.create_index([("timestamp", DESCENDING)], name="timestamp")
    feedback = db[settings.FEEDBACK_COLLECTION]
    feedback.create_index([("timestamp", DESCENDING)], name="timestamp")
    feedback.create_index([("feedback_type", ASCENDING), ("is_positive", ASCENDING)], name="type_sentiment")
    logger.info("Ensured MongoDB indexes")
