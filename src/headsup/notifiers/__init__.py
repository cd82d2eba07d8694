"""
Heads Up - Notifiers Module

Notifier backends storing alert messages:
- In-memory (per request)
- Session flash (survives one redirect)
"""

from headsup.notifiers.base import Notifier
from headsup.notifiers.factory import get_notifier
from headsup.notifiers.memory import InMemoryNotifier
from headsup.notifiers.models import Message
from headsup.notifiers.session import SessionNotifier

__all__ = [
    "InMemoryNotifier",
    "Message",
    "Notifier",
    "SessionNotifier",
    "get_notifier",
]
