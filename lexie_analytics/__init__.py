"""Lexie Analytics: telemetry ingestion and dashboards."""

__version__ = "1.0.0"
