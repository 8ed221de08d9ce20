"""Feedback analytics: sentiment breakdown, feedback list and content ratings."""
import logging
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from lexie_analytics.analytics.base import Row
from lexie_analytics.core.config import settings
from lexie_analytics.models.event import (
    DEFAULT_FEEDBACK_TYPE,
    FeedbackCategory,
    FeedbackKind,
)
from lexie_analytics.models.metrics import (
    ContentRating,
    FeedbackEntry,
    FeedbackReport,
    SentimentCount,
)
from lexie_analytics.repositories.store import DESCENDING, EventStore

logger = logging.getLogger(__name__)

CONTENT_RATING_LABELS = {
    FeedbackKind.FLASHCARD: "Flashcards",
    FeedbackKind.QUIZ: "Quiz questions",
    FeedbackKind.CONTENT: "Study set",
}
HOMEWORK_LABEL = "Homework help"


def _details(row: Row) -> Dict[str, Any]:
    details = row.get("details")
    return details if isinstance(details, dict) else {}


def _feedback_type(row: Row) -> str:
    return str(row.get("feedback_type") or DEFAULT_FEEDBACK_TYPE)


def _is_positive(row: Row) -> Optional[bool]:
    value = row.get("is_positive")
    return value if isinstance(value, bool) else None


def sentiment_summary(rows: Iterable[Row]) -> List[SentimentCount]:
    """Count feedback rows per (feedback_type, is_positive), largest group first"""
    counts: Counter = Counter((_feedback_type(row), _is_positive(row)) for row in rows)
    # None sorts after False/True within a feedback type
    ordered = sorted(
        counts.items(),
        key=lambda item: (-item[1], item[0][0], 2 if item[0][1] is None else int(not item[0][1])),
    )
    return [
        SentimentCount(feedback_type=feedback_type, is_positive=is_positive, count=count)
        for (feedback_type, is_positive), count in ordered
    ]


def content_rating_label(row: Row) -> Optional[str]:
    """Rating bucket of a feedback row, or None for feedback that is not a content rating"""
    kind = FeedbackKind.from_value(row.get("feedback_type"))
    if kind is FeedbackKind.CONTENT and _details(row).get("category") == "homework":
        return HOMEWORK_LABEL
    return CONTENT_RATING_LABELS.get(kind)


def content_ratings(rows: Iterable[Row]) -> List[ContentRating]:
    ratings: Dict[str, ContentRating] = {}
    for row in rows:
        label = content_rating_label(row)
        if label is None:
            continue
        rating = ratings.setdefault(label, ContentRating(label=label))
        if row.get("is_positive") is True:
            rating.positive += 1
        else:
            rating.negative += 1
        rating.total += 1
    return list(ratings.values())


def feedback_entry(row: Row) -> FeedbackEntry:
    details = _details(row)
    text = details.get("feedback_text")
    timestamp = row.get("timestamp")
    return FeedbackEntry(
        timestamp=timestamp if isinstance(timestamp, datetime) else None,
        kind=FeedbackKind.from_value(row.get("feedback_type")),
        feedback_type=_feedback_type(row),
        category=FeedbackCategory.from_value(details.get("category")),
        is_positive=_is_positive(row),
        text=str(text) if text else None,
        has_screenshot=bool(row.get("screenshot")),
    )


def compute_feedback_report(rows: List[Row], total_feedback: Optional[int] = None) -> FeedbackReport:
    """
    Build the feedback page report from feedback rows, newest first

    Args:
        rows: Feedback rows in display order
        total_feedback: Size of the whole feedback collection, defaults to len(rows)
    """
    return FeedbackReport(
        total_feedback=len(rows) if total_feedback is None else total_feedback,
        entries=[feedback_entry(row) for row in rows],
        content_ratings=content_ratings(rows),
    )


def load_feedback_report(store: EventStore, limit: Optional[int] = None) -> FeedbackReport:
    """
    Read the newest feedback rows and summarise them

    Raises:
        AggregationReadFailure: if a store read fails
    """
    limit = limit or settings.FEEDBACK_PAGE_LIMIT
    rows = store.select_rows(
        settings.FEEDBACK_COLLECTION,
        sort=[("timestamp", DESCENDING)],
        limit=limit,
    )
    total = store.count_rows(settings.FEEDBACK_COLLECTION)
    logger.info(f"Loaded {len(rows)} of {total} feedback records")
    return compute_feedback_report(rows, total)
