from .renderer import ReportKind, render, render_error

__all__ = ['ReportKind', 'render', 'render_error']
