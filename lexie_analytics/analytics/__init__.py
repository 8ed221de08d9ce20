"""
Aggregation engine
Pure computations over rows already fetched from the store
"""

from .metrics import compute_metrics, load_metrics
from .feedback import compute_feedback_report, load_feedback_report

__all__ = [
    'compute_metrics',
    'load_metrics',
    'compute_feedback_report',
    'load_feedback_report',
]
