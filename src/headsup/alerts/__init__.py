"""Alerts module - Aggregator and query builder."""

from headsup.alerts.query import AlertQuery
from headsup.alerts.service import Alerts

__all__ = [
    "AlertQuery",
    "Alerts",
]
