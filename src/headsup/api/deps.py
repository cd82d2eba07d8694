"""
Heads Up - API Dependencies
"""

from fastapi import HTTPException, Request, status

from headsup.alerts.service import Alerts
from headsup.core.config import settings
from headsup.notifiers.factory import get_notifier


def get_alerts(request: Request) -> Alerts:
    """
    Dependency building the alerts aggregator for the current request.
    
    Registers the session flash notifier and a per-request view notifier.
    Requires Starlette's ``SessionMiddleware``.
    """
    if "session" not in request.scope:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="SessionMiddleware is required for flash alerts",
        )
    
    alerts = Alerts.from_settings(settings)
    alerts.add_notifier(
        settings.HEADSUP_DEFAULT_NOTIFIER,
        get_notifier("session", session=request.session, key=settings.HEADSUP_SESSION_KEY),
    )
    alerts.add_notifier(settings.HEADSUP_VIEW_NOTIFIER, get_notifier("memory"))
    return alerts
