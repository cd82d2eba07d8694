"""
Heads Up - Session Flash Notifier

Keeps flash messages in a host-provided session mapping (for example
Starlette's ``request.session``) so they survive exactly one redirect.
"""

from typing import Any, List, MutableMapping

import structlog

from headsup.core.config import settings
from headsup.notifiers.memory import InMemoryNotifier
from headsup.notifiers.models import Message

logger = structlog.get_logger()


class SessionNotifier(InMemoryNotifier):
    """
    Notifier backed by a session mapping.
    
    - ``is_flash=True``: the message is written to the session and shows up
      in :meth:`all` on the next request only.
    - ``is_flash=False``: the message is visible for the current request only.
    
    Messages flashed by the previous request are taken out of the session
    when the notifier is created.
    """
    
    name = "session"
    
    def __init__(
        self,
        session: MutableMapping[str, Any],
        key: str = settings.HEADSUP_SESSION_KEY,
    ):
        self.session = session
        self.key = key
        
        flashed = session.pop(key, None) or []
        super().__init__(Message.from_dict(item) for item in flashed)
        
        if flashed:
            logger.debug("Flashed alerts restored", key=key, count=len(flashed))
    
    def pending(self) -> List[Message]:
        """Messages flashed for the next request."""
        return [Message.from_dict(item) for item in self.session.get(self.key) or []]
    
    def reflash(self) -> None:
        """Keep the current messages for one more request."""
        for message in self.all():
            self._store(message, is_flash=True)
    
    def _store(self, message: Message, is_flash: bool) -> None:
        if not is_flash:
            super()._store(message, is_flash)
            return
        
        bucket = list(self.session.get(self.key) or [])
        bucket.append(message.to_dict())
        # assign instead of mutating in place so the session is marked dirty
        self.session[self.key] = bucket
