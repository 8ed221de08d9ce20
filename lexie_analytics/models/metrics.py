"""
Report models produced by the aggregation engine
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from lexie_analytics.models.event import (
    FeedbackCategory,
    FeedbackKind,
    SessionContext,
    utcnow,
)


class RankedCount(BaseModel):
    name: str
    count: int


class RetentionStats(BaseModel):
    users_with_multiple_weeks: int = 0
    users_with_consecutive_weeks: int = 0
    rate: float = 0.0  # percentage, unrounded


class DurationStats(BaseModel):
    count: int = 0
    average_seconds: float = 0.0


class SessionDurationSummary(BaseModel):
    by_context: Dict[SessionContext, DurationStats] = Field(
        default_factory=lambda: {context: DurationStats() for context in SessionContext}
    )
    overall: DurationStats = Field(default_factory=DurationStats)


class UserSessionStats(BaseModel):
    user_id: str
    average_seconds: float
    session_count: int


class SentimentCount(BaseModel):
    feedback_type: str
    is_positive: Optional[bool] = None
    count: int


class MetricsReport(BaseModel):
    """Everything shown on the metrics dashboard"""
    generated_at: datetime = Field(default_factory=utcnow)
    total_events: int = 0
    unique_users: int = 0
    unique_devices: int = 0
    feature_usage: List[RankedCount] = Field(default_factory=list)
    screen_views: List[RankedCount] = Field(default_factory=list)
    retention: RetentionStats = Field(default_factory=RetentionStats)
    study_sets_created: int = 0
    study_sets_per_user: float = 0.0
    session_durations: SessionDurationSummary = Field(default_factory=SessionDurationSummary)
    feedback_summary: List[SentimentCount] = Field(default_factory=list)
    top_users: List[UserSessionStats] = Field(default_factory=list)


class FeedbackEntry(BaseModel):
    timestamp: Optional[datetime] = None
    kind: FeedbackKind
    feedback_type: str
    category: FeedbackCategory
    is_positive: Optional[bool] = None
    text: Optional[str] = None
    has_screenshot: bool = False


class ContentRating(BaseModel):
    label: str
    positive: int = 0
    negative: int = 0
    total: int = 0


class FeedbackReport(BaseModel):
    """Everything shown on the feedback page"""
    generated_at: datetime = Field(default_factory=utcnow)
    total_feedback: int = 0
    entries: List[FeedbackEntry] = Field(default_factory=list)
    content_ratings: List[ContentRating] = Field(default_factory=list)
