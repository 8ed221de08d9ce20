"""Usage analytics: distinct users and devices, feature and screen rankings."""
from collections import Counter
from typing import Iterable, List, Optional, Set

from lexie_analytics.analytics.base import Row, properties_of, rows_of_type
from lexie_analytics.models.metrics import RankedCount

FEATURE_USE = "FEATURE_USE"
SCREEN_VIEW = "SCREEN_VIEW"
STUDY_SET_CREATED = "STUDY_SET_CREATED"
SCREEN_RANK_LIMIT = 10


def distinct_values(rows: Iterable[Row], field: str) -> Set[str]:
    """Distinct non-null values of a top-level field"""
    return {row[field] for row in rows if row.get(field) is not None}


def rank_by_property(
    rows: Iterable[Row],
    event_type: str,
    property_name: str,
    limit: Optional[int] = None,
) -> List[RankedCount]:
    """
    Count rows of one type grouped by a property value, most frequent first
    """
    counts = Counter()
    for row in rows_of_type(rows, event_type):
        value = properties_of(row).get(property_name)
        if value is None:
            continue
        counts[str(value)] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        ranked = ranked[:limit]
    return [RankedCount(name=name, count=count) for name, count in ranked]


def feature_usage(rows: Iterable[Row]) -> List[RankedCount]:
    return rank_by_property(rows, FEATURE_USE, "feature_name")


def screen_views(rows: Iterable[Row]) -> List[RankedCount]:
    return rank_by_property(rows, SCREEN_VIEW, "screen_name", limit=SCREEN_RANK_LIMIT)


def count_study_sets(rows: Iterable[Row]) -> int:
    return sum(1 for _ in rows_of_type(rows, STUDY_SET_CREATED))


def study_sets_per_user(study_sets: int, unique_users: int) -> float:
    return study_sets / unique_users if unique_users else 0.0
