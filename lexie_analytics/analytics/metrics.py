"""Dashboard metrics."""
import logging
from typing import List

from lexie_analytics.analytics import engagement, retention, sessions
from lexie_analytics.analytics.base import Row
from lexie_analytics.analytics.feedback import sentiment_summary
from lexie_analytics.core.config import settings
from lexie_analytics.models.metrics import MetricsReport
from lexie_analytics.repositories.store import EventStore

logger = logging.getLogger(__name__)


def compute_metrics(event_rows: List[Row], feedback_rows: List[Row]) -> MetricsReport:
    """
    Compute every dashboard metric from analytics and feedback rows

    Pure: the rows are read, never modified, and empty input yields a
    report of zeros.
    """
    unique_users = len(engagement.distinct_values(event_rows, "user_id"))
    study_sets = engagement.count_study_sets(event_rows)
    return MetricsReport(
        total_events=len(event_rows),
        unique_users=unique_users,
        unique_devices=len(engagement.distinct_values(event_rows, "device_id")),
        feature_usage=engagement.feature_usage(event_rows),
        screen_views=engagement.screen_views(event_rows),
        retention=retention.weekly_retention(event_rows),
        study_sets_created=study_sets,
        study_sets_per_user=engagement.study_sets_per_user(study_sets, unique_users),
        session_durations=sessions.duration_by_context(event_rows),
        feedback_summary=sentiment_summary(feedback_rows),
        top_users=sessions.top_users_by_session_time(event_rows),
    )


def load_metrics(store: EventStore) -> MetricsReport:
    """
    Fetch analytics and feedback rows and compute the dashboard metrics

    Raises:
        AggregationReadFailure: if a store read fails
    """
    event_rows = store.select_rows(settings.ANALYTICS_COLLECTION)
    feedback_rows = store.select_rows(settings.FEEDBACK_COLLECTION)
    logger.info(f"Computing metrics over {len(event_rows)} events and {len(feedback_rows)} feedback records")
    return compute_metrics(event_rows, feedback_rows)
