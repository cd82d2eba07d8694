"""
Heads Up - Notifier Factory

Factory for creating notifier backends by name.
"""

from typing import Any

import structlog

from headsup.notifiers.base import Notifier

logger = structlog.get_logger()


def get_notifier(notifier_type: str = "memory", **kwargs: Any) -> Notifier:
    """
    Create a notifier backend.
    
    Args:
        notifier_type: "memory" or "session"
        **kwargs: Passed to the backend constructor
        
    Returns:
        Notifier instance
        
    Raises:
        ValueError: If unknown notifier type
    """
    logger.debug("Creating notifier", notifier_type=notifier_type)
    
    if notifier_type == "memory":
        from headsup.notifiers.memory import InMemoryNotifier
        return InMemoryNotifier(**kwargs)
    
    elif notifier_type == "session":
        from headsup.notifiers.session import SessionNotifier
        return SessionNotifier(**kwargs)
    
    else:
        raise ValueError(
            f"Unknown notifier type: {notifier_type}. "
            "Valid options are: 'memory', 'session'"
        )
