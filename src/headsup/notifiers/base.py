"""
Heads Up - Notifier Base Classes

Abstract capability implemented by every notifier backend.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from headsup.notifiers.models import Message


class Notifier(ABC):
    """Abstract base class for notifier backends."""
    
    @abstractmethod
    def alert(
        self,
        messages: Any,
        type: str,
        area: Optional[str] = None,
        is_flash: bool = False,
        extra: Optional[str] = None,
    ) -> None:
        """
        Store one or more messages.
        
        Args:
            messages: A single message, a sequence of messages or an error bag
            type: Severity tag of the messages
            area: Display zone of the messages
            is_flash: Backend-specific hint to keep the messages for the next request
            extra: Backend-specific sub-key stored on each message
        """
        pass
    
    @abstractmethod
    def all(self) -> List[Message]:
        """
        Return every stored message in insertion order.
        
        Must not consume the messages; repeated calls return the same result.
        """
        pass
