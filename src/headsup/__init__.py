"""
Heads Up - Alert Aggregation

Collects alert / flash messages from pluggable notifier backends and
exposes chainable area and type filters over all of them.
"""

__version__ = "0.1.0"
__author__ = "Heads Up Team"

from headsup.alerts import AlertQuery, Alerts
from headsup.core.exceptions import (
    HeadsUpError,
    NotifierConfigurationError,
    NotifierNotFoundError,
)
from headsup.core.schemas import AlertType
from headsup.notifiers import InMemoryNotifier, Message, Notifier, SessionNotifier

__all__ = [
    "Alerts",
    "AlertQuery",
    "AlertType",
    "HeadsUpError",
    "InMemoryNotifier",
    "Message",
    "Notifier",
    "NotifierConfigurationError",
    "NotifierNotFoundError",
    "SessionNotifier",
]
