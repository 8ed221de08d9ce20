"""
Event ingestion service
"""
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from lexie_analytics.core.config import settings
from lexie_analytics.core.errors import InvalidInput, RecordPersistFailure
from lexie_analytics.models.event import Event, EventBatch, RecordKind
from lexie_analytics.repositories.store import EventStore
from lexie_analytics.services.classifier import (
    classify,
    to_analytics_record,
    to_feedback_record,
)

logger = logging.getLogger(__name__)


@dataclass
class IngestSummary:
    analytics_stored: int = 0
    feedback_stored: int = 0
    total_received: int = 0

    @property
    def message(self) -> str:
        return (
            f"Processed {self.total_received} events "
            f"({self.analytics_stored} analytics, {self.feedback_stored} feedback)"
        )


def parse_batch(payload: Any) -> EventBatch:
    """Validate the request envelope; individual events are checked later"""
    if not isinstance(payload, dict) or not isinstance(payload.get("events"), list):
        raise InvalidInput("Invalid events data")
    try:
        return EventBatch.model_validate(payload)
    except ValidationError as e:
        raise InvalidInput("Invalid events data", details={"errors": e.errors()}) from e


def ingest_batch(store: EventStore, payload: Any) -> IngestSummary:
    """
    Classify and persist every event of a batch

    Each event is handled on its own: an invalid event or a failed write is
    logged and left out of the counts, and the rest of the batch carries on.

    Raises:
        InvalidInput: if the payload has no array-typed ``events`` field
    """
    batch = parse_batch(payload)
    summary = IngestSummary(total_received=len(batch.events))
    logger.info(
        f"Received {summary.total_received} events from "
        f"{batch.device_id or 'unknown'} ({batch.platform or 'unknown'})"
    )

    for position, raw in enumerate(batch.events):
        try:
            event = Event.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Skipping malformed event at position {position}: {e.error_count()} errors")
            continue

        kind = classify(event)
        try:
            if kind is RecordKind.FEEDBACK:
                record = to_feedback_record(event, batch)
                store.insert_one(settings.FEEDBACK_COLLECTION, record.model_dump())
                summary.feedback_stored += 1
            else:
                record = to_analytics_record(event, batch)
                store.insert_one(settings.ANALYTICS_COLLECTION, record.model_dump())
                summary.analytics_stored += 1
        except (RecordPersistFailure, ValidationError) as e:
            logger.error(f"Error storing {kind.value} event {event.id}: {e}")

    logger.info(summary.message)
    return summary
