"""Study session analytics built from SESSION_END events."""
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from lexie_analytics.analytics.base import Row, mean, parse_number, properties_of, rows_of_type
from lexie_analytics.core.errors import MalformedMetricInput
from lexie_analytics.models.event import SessionContext
from lexie_analytics.models.metrics import DurationStats, SessionDurationSummary, UserSessionStats

SESSION_END = "SESSION_END"
TOP_USERS_LIMIT = 5


def session_durations(rows: Iterable[Row]) -> Iterator[Tuple[Row, float]]:
    """Yield SESSION_END rows with their parsed duration, skipping unparseable ones"""
    for row in rows_of_type(rows, SESSION_END):
        try:
            seconds = parse_number(properties_of(row).get("duration_seconds"))
        except MalformedMetricInput:
            continue
        yield row, seconds


def _stats(values: List[float]) -> DurationStats:
    return DurationStats(count=len(values), average_seconds=mean(values))


def duration_by_context(rows: Iterable[Row]) -> SessionDurationSummary:
    buckets: Dict[SessionContext, List[float]] = {context: [] for context in SessionContext}
    overall: List[float] = []
    for row, seconds in session_durations(rows):
        context = SessionContext.from_value(properties_of(row).get("context"))
        buckets[context].append(seconds)
        overall.append(seconds)
    return SessionDurationSummary(
        by_context={context: _stats(values) for context, values in buckets.items()},
        overall=_stats(overall),
    )


def top_users_by_session_time(
    rows: Iterable[Row], limit: Optional[int] = TOP_USERS_LIMIT
) -> List[UserSessionStats]:
    """Users with the longest mean session, longest first"""
    per_user: Dict[str, List[float]] = defaultdict(list)
    for row, seconds in session_durations(rows):
        user_id = row.get("user_id")
        if user_id is None:
            continue
        per_user[str(user_id)].append(seconds)

    stats = [
        UserSessionStats(user_id=user_id, average_seconds=mean(values), session_count=len(values))
        for user_id, values in per_user.items()
    ]
    # user id breaks ties so the ranking never depends on arrival order
    stats.sort(key=lambda s: (-s.average_seconds, s.user_id))
    return stats[:limit] if limit is not None else stats
