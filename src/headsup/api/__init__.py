"""API module - FastAPI integration."""

from headsup.api.deps import get_alerts

__all__ = [
    "get_alerts",
]
