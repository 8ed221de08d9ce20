"""
Tests for session duration analytics
"""
import random

import pytest

from lexie_analytics.analytics.base import parse_number
from lexie_analytics.analytics.sessions import duration_by_context, top_users_by_session_time
from lexie_analytics.core.errors import MalformedMetricInput
from lexie_analytics.models.event import SessionContext


def session_end(duration, context=None, user_id="u1"):
    props = {"duration_seconds": duration}
    if context is not None:
        props["context"] = context
    return {"type": "SESSION_END", "user_id": user_id, "properties": props}


@pytest.mark.parametrize("value,expected", [(60, 60.0), ("90", 90.0), (12.5, 12.5)])
def test_parse_number(value, expected):
    assert parse_number(value) == expected


@pytest.mark.parametrize("value", [None, "bad", True, float("nan"), "inf", [], {}])
def test_parse_number_rejects(value):
    with pytest.raises(MalformedMetricInput):
        parse_number(value)


def test_unparseable_duration_is_skipped():
    rows = [session_end(d, "quiz") for d in (60, 90, "bad", 120)]
    summary = duration_by_context(rows)

    quiz = summary.by_context[SessionContext.QUIZ]
    assert quiz.count == 3
    assert quiz.average_seconds == 90.0
    assert summary.overall.average_seconds == 90.0


def test_durations_bucketed_by_context():
    rows = [
        session_end(100, "study_set"),
        session_end(300, "study_set"),
        session_end(60, "flashcards"),
        session_end(40),
        session_end(80, "something_new"),
        {"type": "SCREEN_VIEW", "properties": {"duration_seconds": 999}},
    ]
    summary = duration_by_context(rows)

    assert summary.by_context[SessionContext.STUDY_SET].average_seconds == 200.0
    assert summary.by_context[SessionContext.FLASHCARDS].average_seconds == 60.0
    assert summary.by_context[SessionContext.QUIZ].count == 0
    assert summary.by_context[SessionContext.QUIZ].average_seconds == 0.0
    other = summary.by_context[SessionContext.OTHER]
    assert other.count == 2
    assert other.average_seconds == 60.0
    assert summary.overall.count == 5
    assert summary.overall.average_seconds == 116.0


def test_empty_sessions():
    summary = duration_by_context([])
    assert set(summary.by_context) == set(SessionContext)
    assert summary.overall.count == 0
    assert summary.overall.average_seconds == 0.0


def test_top_users_ranked_by_mean_duration():
    rows = [
        session_end(100, user_id="a"),
        session_end(300, user_id="a"),
        session_end(500, user_id="b"),
        session_end(50, user_id="c"),
        session_end(50, user_id="d"),
        session_end(10, user_id="e"),
        session_end(700, user_id="f"),
        session_end(5, user_id="g"),
        session_end(1000, user_id=None),
    ]
    top = top_users_by_session_time(rows)

    assert [u.user_id for u in top] == ["f", "b", "a", "c", "d"]
    assert top[2].average_seconds == 200.0
    assert top[2].session_count == 2


def test_top_users_independent_of_order():
    rows = [session_end(d, user_id=u) for u, d in
            [("a", 0.1), ("a", 0.2), ("a", 0.3), ("b", 0.2), ("c", 0.2), ("d", 5), ("e", 1), ("f", 1)]]
    expected = top_users_by_session_time(rows)
    shuffled = list(rows)
    for seed in range(5):
        random.Random(seed).shuffle(shuffled)
        assert top_users_by_session_time(shuffled) == expected


def test_top_users_with_few_users():
    top = top_users_by_session_time([session_end(30, user_id="solo")])
    assert len(top) == 1
    assert top_users_by_session_time([]) == []
