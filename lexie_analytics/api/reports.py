"""
Dashboard pages and metrics API
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from lexie_analytics.analytics import load_feedback_report, load_metrics
from lexie_analytics.models.metrics import MetricsReport
from lexie_analytics.reports import ReportKind, render
from lexie_analytics.repositories.store import EventStore

from .deps import get_store

router = APIRouter(tags=["reports"])


@router.get("/", response_class=HTMLResponse)
def dashboard(store: EventStore = Depends(get_store)):
    """Metrics dashboard, computed fresh on every request"""
    return HTMLResponse(render(ReportKind.METRICS, load_metrics(store)))


@router.get("/feedback", response_class=HTMLResponse)
def feedback(store: EventStore = Depends(get_store)):
    """Newest feedback records and content ratings"""
    return HTMLResponse(render(ReportKind.FEEDBACK, load_feedback_report(store)))


@router.get("/api/metrics", response_model=MetricsReport)
def metrics(store: EventStore = Depends(get_store)):
    return load_metrics(store)
