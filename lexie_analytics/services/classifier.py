"""
Event classification

Decides which collection an ingested event belongs to and builds the record
persisted there.
"""
from typing import Any, Optional

from lexie_analytics.models.event import (
    DEFAULT_FEEDBACK_TYPE,
    FEEDBACK_EVENT_TYPES,
    AnalyticsRecord,
    BatchMetadata,
    Event,
    FeedbackRecord,
    RecordKind,
)


def classify(event: Event) -> RecordKind:
    """
    Classify an event as feedback or analytics, first match wins:

    1. the type is FEEDBACK_SUBMITTED or CONTENT_FEEDBACK (any case)
    2. properties carry a truthy ``feedback_type``
    3. anything else is a generic analytics event
    """
    if event.type.upper() in FEEDBACK_EVENT_TYPES:
        return RecordKind.FEEDBACK
    if event.properties.get("feedback_type"):
        return RecordKind.FEEDBACK
    return RecordKind.ANALYTICS


def _optional_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    return None


def to_feedback_record(event: Event, metadata: BatchMetadata) -> FeedbackRecord:
    props = event.properties
    screenshot = props.get("screenshot")
    return FeedbackRecord(
        user_id=event.user_id,
        feedback_type=str(props.get("feedback_type") or DEFAULT_FEEDBACK_TYPE),
        is_positive=_optional_bool(props.get("is_positive")),
        details=props,
        screenshot=str(screenshot) if screenshot else None,
        device_id=metadata.device_id,
        app_version=metadata.app_version,
        platform=metadata.platform,
        timestamp=event.timestamp,
    )


def to_analytics_record(event: Event, metadata: BatchMetadata) -> AnalyticsRecord:
    return AnalyticsRecord(
        event_id=event.id,
        user_id=event.user_id,
        type=event.type,
        timestamp=event.timestamp,
        properties=event.properties,
        device_id=metadata.device_id,
        app_version=metadata.app_version,
        platform=metadata.platform,
        session_id=event.session_id,
    )
