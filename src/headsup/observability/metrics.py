"""
Heads Up - Prometheus Metrics
"""

from prometheus_client import Counter

ALERTS_RAISED_TOTAL = Counter(
    "headsup_alerts_raised_total",
    "Total number of alert calls routed to a notifier",
    ["notifier", "type", "area"],
)

ALERT_QUERIES_TOTAL = Counter(
    "headsup_alert_queries_total",
    "Total number of alert retrievals",
    ["filtered"],
)


def record_alert(notifier: str, type: str, area: str) -> None:
    """Record an alert routed to a notifier."""
    ALERTS_RAISED_TOTAL.labels(
        notifier=notifier,
        type=type,
        area=area,
    ).inc()


def record_query(filtered: bool) -> None:
    """Record a terminal alert retrieval."""
    ALERT_QUERIES_TOTAL.labels(filtered=str(filtered).lower()).inc()
