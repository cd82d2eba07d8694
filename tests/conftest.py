"""
Heads Up - Test Fixtures
"""

import os
from typing import List
from unittest.mock import create_autospec

import pytest

# Set test environment
os.environ["APP_ENV"] = "test"

from headsup.alerts import Alerts
from headsup.notifiers import InMemoryNotifier, Message, Notifier


@pytest.fixture
def alerts() -> Alerts:
    """Aggregator with ``flash`` as default notifier name (not yet registered)."""
    alerts = Alerts()
    alerts.set_default_notifier("flash")
    return alerts


@pytest.fixture
def memory_notifier() -> InMemoryNotifier:
    """Empty in-memory notifier."""
    return InMemoryNotifier()


@pytest.fixture
def mock_notifier_factory():
    """Build notifier doubles whose ``all()`` returns the given messages."""
    
    def factory(messages: List[Message] = None):
        notifier = create_autospec(Notifier, instance=True)
        notifier.all.return_value = list(messages or [])
        return notifier
    
    return factory


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def header_alerts() -> List[Message]:
    return [
        Message("header error", "error", "header"),
        Message("header warning", "warning", "header"),
    ]


@pytest.fixture
def footer_alerts() -> List[Message]:
    return [
        Message("footer error", "error", "footer"),
        Message("footer warning", "warning", "footer"),
    ]


@pytest.fixture
def layout_alerts(alerts, mock_notifier_factory, header_alerts, footer_alerts) -> Alerts:
    """Aggregator with one notifier holding header and footer alerts."""
    alerts.add_notifier("flash", mock_notifier_factory(header_alerts + footer_alerts))
    return alerts
