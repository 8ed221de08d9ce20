"""
Weekly retention analytics

Clients emit one ``ACTIVE_WEEK`` event per user and calendar week, tagged
with a ``week_key`` of the form ``"<year>-<week>"``.

A user with more than one distinct week key counts as a multi-week user. A
multi-week user is also a consecutive-week user when, after sorting their
keys as strings, two neighbouring keys share the year and are one week
apart. Only neighbours in that string order are compared, so ``"2024-9"``
and ``"2024-10"`` (sorted as ``"2024-10", "2024-9"``) or week 52 followed by
week 1 of the next year are not recognised as consecutive.
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set, Tuple

from lexie_analytics.analytics.base import Row, properties_of, rows_of_type
from lexie_analytics.models.metrics import RetentionStats

ACTIVE_WEEK = "ACTIVE_WEEK"


def parse_week_key(key: str) -> Optional[Tuple[str, int]]:
    """Split ``"2024-10"`` into ``("2024", 10)``; None when malformed"""
    year, sep, week = key.rpartition("-")
    if not sep or not year:
        return None
    try:
        return year, int(week)
    except ValueError:
        return None


def weeks_by_user(rows: Iterable[Row]) -> Dict[str, Set[str]]:
    weeks: Dict[str, Set[str]] = defaultdict(set)
    for row in rows_of_type(rows, ACTIVE_WEEK):
        user_id = row.get("user_id")
        week_key = properties_of(row).get("week_key")
        if user_id is None or week_key is None:
            continue
        weeks[user_id].add(str(week_key))
    return weeks


def has_consecutive_weeks(week_keys: Iterable[str]) -> bool:
    ordered: List[str] = sorted(week_keys)
    for current, following in zip(ordered, ordered[1:]):
        a = parse_week_key(current)
        b = parse_week_key(following)
        if a is None or b is None:
            continue
        if a[0] == b[0] and b[1] - a[1] == 1:
            return True
    return False


def weekly_retention(rows: Iterable[Row]) -> RetentionStats:
    multiple = 0
    consecutive = 0
    for week_keys in weeks_by_user(rows).values():
        if len(week_keys) <= 1:
            continue
        multiple += 1
        if has_consecutive_weeks(week_keys):
            consecutive += 1
    return RetentionStats(
        users_with_multiple_weeks=multiple,
        users_with_consecutive_weeks=consecutive,
        rate=(consecutive / multiple) * 100 if multiple else 0.0,
    )
