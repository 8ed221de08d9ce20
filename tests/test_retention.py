"""
Tests for weekly retention
"""
from lexie_analytics.analytics.retention import (
    has_consecutive_weeks,
    parse_week_key,
    weekly_retention,
)


def active_week(user_id, week_key):
    return {"type": "ACTIVE_WEEK", "user_id": user_id, "properties": {"week_key": week_key}}


def test_parse_week_key():
    assert parse_week_key("2024-10") == ("2024", 10)
    assert parse_week_key("2024-x") is None
    assert parse_week_key("202410") is None


def test_consecutive_weeks_counted():
    rows = [active_week("u1", "2024-10"), active_week("u1", "2024-11")]
    stats = weekly_retention(rows)
    assert stats.users_with_multiple_weeks == 1
    assert stats.users_with_consecutive_weeks == 1
    assert stats.rate == 100.0


def test_gap_is_multiple_but_not_consecutive():
    rows = [active_week("u1", "2024-10"), active_week("u1", "2024-12")]
    stats = weekly_retention(rows)
    assert stats.users_with_multiple_weeks == 1
    assert stats.users_with_consecutive_weeks == 0
    assert stats.rate == 0.0


def test_single_week_users_are_ignored():
    rows = [
        active_week("u1", "2024-10"),
        active_week("u1", "2024-10"),
        active_week("u2", "2024-20"),
        active_week("u2", "2024-21"),
        active_week("u3", "2024-20"),
        active_week("u3", "2024-30"),
    ]
    stats = weekly_retention(rows)
    assert stats.users_with_multiple_weeks == 2
    assert stats.users_with_consecutive_weeks == 1
    assert stats.rate == 50.0


def test_only_neighbours_in_string_order_are_compared():
    # "2024-10" sorts before "2024-9"
    assert has_consecutive_weeks({"2024-9", "2024-10"}) is False
    # week 52 and week 1 of the following year are not neighbours
    assert has_consecutive_weeks({"2023-52", "2024-1"}) is False
    # an unrelated key between two consecutive weeks hides them
    assert has_consecutive_weeks({"2024-11", "2024-12"}) is True
    assert has_consecutive_weeks({"2024-11", "2024-115", "2024-12"}) is False


def test_rows_without_user_or_week_key_are_ignored():
    rows = [
        active_week(None, "2024-10"),
        {"type": "ACTIVE_WEEK", "user_id": "u1", "properties": {}},
        {"type": "ACTIVE_WEEK", "user_id": "u1", "properties": None},
        {"type": "SCREEN_VIEW", "user_id": "u1", "properties": {"week_key": "2024-11"}},
    ]
    stats = weekly_retention(rows)
    assert stats.users_with_multiple_weeks == 0
    assert stats.rate == 0.0


def test_malformed_week_keys_do_not_fail():
    rows = [active_week("u1", "garbage"), active_week("u1", "2024-11")]
    stats = weekly_retention(rows)
    assert stats.users_with_multiple_weeks == 1
    assert stats.users_with_consecutive_weeks == 0
