"""
HTML report rendering

Templates live in ``reports/templates``. Unit conversion and rounding are
done by the template filters below, on the way out; report objects are
passed through untouched.
"""
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from lexie_analytics.core.config import settings
from lexie_analytics.models.event import FeedbackCategory, SessionContext
from lexie_analytics.models.metrics import FeedbackReport, MetricsReport

TEMPLATES_DIR = Path(__file__).parent / "templates"


class ReportKind(str, Enum):
    METRICS = "metrics"
    FEEDBACK = "feedback"


TEMPLATES = {
    ReportKind.METRICS: "dashboard.html",
    ReportKind.FEEDBACK: "feedback.html",
}

CONTEXT_LABELS = {
    SessionContext.STUDY_SET: "Study sets",
    SessionContext.QUIZ: "Quizzes",
    SessionContext.FLASHCARDS: "Flashcards",
    SessionContext.OTHER: "Other",
}

CATEGORY_TAGS = {
    FeedbackCategory.BUG: ("Bug", "#FF575E", "#381516"),
    FeedbackCategory.FEATURE: ("Feature request", "#72CDA8", "#0F2813"),
    FeedbackCategory.CONTENT: ("Content", "#47A8FF", "#022249"),
    FeedbackCategory.UX: ("UX", "#FF9300", "#311E07"),
    FeedbackCategory.TECHNICAL: ("Technical", "#a0aec0", "#2D3748"),
    FeedbackCategory.OTHER: ("Other", "#a0aec0", "#2D3748"),
}


def to_minutes(seconds: float, digits: int = 1) -> float:
    return round((seconds or 0) / 60, digits)


def to_percent(part: float, whole: Optional[float] = None) -> int:
    """Round a percentage, or the share ``part / whole`` as a percentage"""
    if whole is None:
        return int(round(part or 0))
    return int(round(part / whole * 100)) if whole else 0


def format_date(value: Optional[datetime]) -> str:
    if not value:
        return "Unknown date"
    return f"{value:%B} {value.day}, {value.year}"


def format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["minutes"] = to_minutes
    env.filters["percent"] = to_percent
    env.filters["date"] = format_date
    env.filters["timestamp"] = format_timestamp
    env.globals.update(
        title=settings.PROJECT_NAME,
        context_labels=CONTEXT_LABELS,
        category_tags=CATEGORY_TAGS,
    )
    return env


environment = _build_environment()


def render(kind: Union[ReportKind, str], report: Union[MetricsReport, FeedbackReport]) -> str:
    """Render a report into a complete HTML document"""
    kind = ReportKind(kind)
    template = environment.get_template(TEMPLATES[kind])
    return template.render(report=report)


def render_error(
    heading: str,
    message: str,
    back_href: str = "/",
    back_label: str = "Back to Dashboard",
) -> str:
    template = environment.get_template("error.html")
    return template.render(
        heading=heading,
        message=message,
        back_href=back_href,
        back_label=back_label,
    )
