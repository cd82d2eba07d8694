"""Observability module - Prometheus metrics."""

from headsup.observability.metrics import (
    ALERT_QUERIES_TOTAL,
    ALERTS_RAISED_TOTAL,
    record_alert,
    record_query,
)

__all__ = [
    "ALERT_QUERIES_TOTAL",
    "ALERTS_RAISED_TOTAL",
    "record_alert",
    "record_query",
]
