"""
Event models

Incoming client events, the batch envelope they arrive in, and the two
record shapes persisted by ingestion.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

FEEDBACK_EVENT_TYPES = {"FEEDBACK_SUBMITTED", "CONTENT_FEEDBACK"}
DEFAULT_FEEDBACK_TYPE = "general"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecordKind(str, Enum):
    """Persistence target of an ingested event"""
    FEEDBACK = "feedback"
    ANALYTICS = "analytics"


class FeedbackKind(str, Enum):
    APP = "app_feedback"
    FLASHCARD = "flashcard_feedback"
    QUIZ = "quiz_feedback"
    CONTENT = "content_feedback"
    GENERAL = "general"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_value(cls, value: Any) -> "FeedbackKind":
        if not isinstance(value, str) or not value.strip():
            return cls.GENERAL
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNRECOGNIZED


class FeedbackCategory(str, Enum):
    BUG = "bug"
    FEATURE = "feature"
    CONTENT = "content"
    UX = "ux"
    TECHNICAL = "technical"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> "FeedbackCategory":
        if not isinstance(value, str):
            return cls.OTHER
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


class SessionContext(str, Enum):
    STUDY_SET = "study_set"
    QUIZ = "quiz"
    FLASHCARDS = "flashcards"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> "SessionContext":
        if not isinstance(value, str):
            return cls.OTHER
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


class Event(BaseModel):
    """A single client-reported occurrence"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    type: str = ""
    timestamp: datetime = Field(default_factory=utcnow)
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    properties: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", "user_id", "session_id", mode="before")
    @classmethod
    def _stringify_ids(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, v):
        return "" if v is None else v

    @field_validator("timestamp", mode="before")
    @classmethod
    def _default_timestamp(cls, v):
        return utcnow() if v is None else v

    @field_validator("properties", mode="before")
    @classmethod
    def _default_properties(cls, v):
        return {} if v is None else v


class BatchMetadata(BaseModel):
    """Client metadata shared by every event in a batch"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    device_id: Optional[str] = Field(default=None, alias="deviceId")
    app_version: Optional[str] = Field(default=None, alias="appVersion")
    platform: Optional[str] = None

    @field_validator("device_id", "app_version", "platform", mode="before")
    @classmethod
    def _stringify(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)


class EventBatch(BatchMetadata):
    events: List[Any]


class AnalyticsRecord(BaseModel):
    """Row persisted into the analytics events collection"""
    event_id: Optional[str] = None
    user_id: Optional[str] = None
    type: str
    timestamp: datetime
    properties: Dict[str, Any] = Field(default_factory=dict)
    device_id: Optional[str] = None
    app_version: Optional[str] = None
    platform: Optional[str] = None
    session_id: Optional[str] = None


class FeedbackRecord(BaseModel):
    """Row persisted into the feedback collection"""
    user_id: Optional[str] = None
    feedback_type: str = DEFAULT_FEEDBACK_TYPE
    is_positive: Optional[bool] = None
    details: Dict[str, Any] = Field(default_factory=dict)
    screenshot: Optional[str] = None
    device_id: Optional[str] = None
    app_version: Optional[str] = None
    platform: Optional[str] = None
    timestamp: datetime


class CollectResponse(BaseModel):
    success: bool = True
    message: str
