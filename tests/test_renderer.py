"""
Tests for HTML report rendering
"""
from datetime import datetime, timezone

import pytest

from lexie_analytics.models.event import FeedbackCategory, FeedbackKind, SessionContext
from lexie_analytics.models.metrics import (
    ContentRating,
    DurationStats,
    FeedbackEntry,
    FeedbackReport,
    MetricsReport,
    RankedCount,
    RetentionStats,
    SentimentCount,
)
from lexie_analytics.reports import ReportKind, render, render_error
from lexie_analytics.reports.renderer import format_date, to_minutes, to_percent


def test_filters():
    assert to_minutes(90) == 1.5
    assert to_minutes(None) == 0
    assert to_percent(66.666) == 67
    assert to_percent(2, 3) == 67
    assert to_percent(1, 0) == 0
    assert format_date(datetime(2024, 3, 1, tzinfo=timezone.utc)) == "March 1, 2024"
    assert format_date(None) == "Unknown date"


def test_empty_metrics_dashboard():
    html = render(ReportKind.METRICS, MetricsReport())

    assert '<div class="metric" id="total-events">0</div>' in html
    assert '<div class="metric" id="retention-rate">0%</div>' in html
    assert "No feature usage data" in html
    assert "No feedback data" in html


def test_metrics_dashboard_values():
    report = MetricsReport(
        total_events=42,
        unique_users=3,
        retention=RetentionStats(users_with_multiple_weeks=3, users_with_consecutive_weeks=2, rate=200 / 3),
        feature_usage=[RankedCount(name="flashcards", count=5)],
        feedback_summary=[
            SentimentCount(feedback_type="app_feedback", is_positive=True, count=2),
            SentimentCount(feedback_type="general", is_positive=None, count=1),
        ],
    )
    report.session_durations.by_context[SessionContext.QUIZ] = DurationStats(count=3, average_seconds=90)
    report.session_durations.overall = DurationStats(count=3, average_seconds=90)

    html = render("metrics", report)

    assert '<div class="metric" id="total-events">42</div>' in html
    assert '<div class="metric" id="retention-rate">67%</div>' in html
    assert '<div class="metric" id="average-session">1.5 min</div>' in html
    assert "Quizzes: 1.5 min (3 sessions)" in html
    assert "<td>flashcards</td><td>5</td>" in html
    assert "Unrated" in html


def test_render_does_not_modify_report():
    report = MetricsReport(total_events=1, feature_usage=[RankedCount(name="quiz", count=1)])
    before = report.model_dump()

    render(ReportKind.METRICS, report)

    assert report.model_dump() == before


def test_user_supplied_text_is_escaped():
    report = FeedbackReport(
        total_feedback=1,
        entries=[
            FeedbackEntry(
                kind=FeedbackKind.APP,
                feedback_type="app_feedback",
                category=FeedbackCategory.BUG,
                text="<script>alert(1)</script>",
            )
        ],
    )
    html = render(ReportKind.FEEDBACK, report)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


def test_feedback_page():
    report = FeedbackReport(
        total_feedback=5,
        entries=[
            FeedbackEntry(
                timestamp=datetime(2024, 3, 1, tzinfo=timezone.utc),
                kind=FeedbackKind.APP,
                feedback_type="app_feedback",
                category=FeedbackCategory.FEATURE,
                has_screenshot=True,
            )
        ],
        content_ratings=[ContentRating(label="Flashcards", positive=2, negative=1, total=3)],
    )
    html = render(ReportKind.FEEDBACK, report)

    assert "Showing 1 of 5 feedback records" in html
    assert "March 1, 2024" in html
    assert "Feature request" in html
    assert "No feedback text provided" in html
    assert "Screenshot attached" in html
    assert "&#128077; 67%" in html
    assert "&#128078; 33%" in html


def test_empty_feedback_page():
    html = render(ReportKind.FEEDBACK, FeedbackReport())

    assert "No feedback available" in html
    assert "No content ratings available" in html


def test_unknown_report_kind():
    with pytest.raises(ValueError):
        render("weekly", MetricsReport())


def test_render_error():
    html = render_error("Error loading dashboard", "boom <b>", "/feedback", "Feedback")

    assert "<h1>Error loading dashboard</h1>" in html
    assert "boom &lt;b&gt;" in html
    assert 'href="/feedback"' in html
