"""
Heads Up - In-Memory Notifier

Default notifier backend. Messages live as long as the notifier instance,
which is normally one request.
"""

from typing import Any, Iterable, List, Optional

import structlog

from headsup.core.config import settings
from headsup.core.schemas import AlertType
from headsup.forms.errors import first_errors, is_error_bag
from headsup.notifiers.base import Notifier
from headsup.notifiers.models import Message

logger = structlog.get_logger()


class InMemoryNotifier(Notifier):
    """
    Notifier keeping its messages in a plain list.
    
    ``is_flash`` is accepted for interface parity and ignored. Strings and
    non-iterable payloads are stored as one message, other iterables as one
    message per item. Error bags passed as ``messages`` are mapped to one
    ``error`` message per field, with the field name stored as the message
    ``extra``; see :meth:`form`.
    """
    
    name = "memory"
    
    def __init__(self, messages: Optional[Iterable[Message]] = None):
        self._messages: List[Message] = list(messages or [])
    
    def alert(
        self,
        messages: Any,
        type: str,
        area: Optional[str] = None,
        is_flash: bool = False,
        extra: Optional[str] = None,
    ) -> None:
        if is_error_bag(messages):
            self.alert_form_errors(messages, area=area, is_flash=is_flash)
            return
        
        for text in self._normalize(messages):
            self._store(Message(text=text, type=type, area=area, extra=extra), is_flash)
    
    def alert_form_errors(
        self,
        errors: Any,
        area: Optional[str] = None,
        type: str = AlertType.ERROR.value,
        is_flash: bool = False,
    ) -> int:
        """
        Store one message per field of a validation error bag.
        
        Args:
            errors: Error bag (mapping, pydantic ValidationError, ...)
            area: Display zone of the messages, defaults to HEADSUP_FORM_AREA
            type: Severity tag of the messages
            is_flash: Forwarded to the storage hook
            
        Returns:
            Number of messages stored
        """
        if area is None:
            area = settings.HEADSUP_FORM_AREA
        
        fields = first_errors(errors)
        for field, text in fields.items():
            self._store(Message(text=text, type=type, area=area, extra=field), is_flash)
        
        logger.debug("Form errors mapped", area=area, fields=list(fields))
        return len(fields)
    
    def form(
        self,
        field: str,
        message: Optional[Any] = None,
        default: Optional[Any] = None,
    ) -> Any:
        """
        Look up the error stored for a form field.
        
        Args:
            field: Form field name
            message: Value returned instead of the stored text when the field has an error
            default: Value returned when the field has no error
            
        Returns:
            ``message`` or the stored error text if the field has an error, else ``default``
        """
        for alert in self.all():
            if alert.type == AlertType.ERROR.value and alert.extra == field:
                return message if message is not None else alert.text
        return default
    
    def all(self) -> List[Message]:
        return list(self._messages)
    
    def clear(self) -> None:
        """Drop all stored messages."""
        self._messages.clear()
    
    def _store(self, message: Message, is_flash: bool) -> None:
        self._messages.append(message)
    
    @staticmethod
    def _normalize(messages: Any) -> List[Any]:
        if messages is None:
            return []
        if isinstance(messages, (str, bytes)) or not isinstance(messages, Iterable):
            return [messages]
        return list(messages)
