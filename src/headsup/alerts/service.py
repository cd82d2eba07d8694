"""
Heads Up - Alerts Aggregator

Routes alerts to named notifier backends and queries the union of their
messages.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import structlog

from headsup.alerts.query import AlertQuery
from headsup.core.config import Settings, settings
from headsup.core.exceptions import NotifierConfigurationError, NotifierNotFoundError
from headsup.core.schemas import AlertType
from headsup.notifiers.base import Notifier
from headsup.notifiers.models import Message
from headsup.observability.metrics import record_alert, record_query

logger = structlog.get_logger()


class Alerts:
    """
    Alert aggregator.
    
    Owns a mapping of notifier name -> notifier. Raising an alert routes it
    to the named notifier, or to the default one. Retrieval concatenates the
    messages of every notifier in registration order; the aggregator never
    stores messages itself.
    
    Meant to live for one request; not safe for concurrent mutation.
    """
    
    def __init__(
        self,
        default_notifier: Optional[str] = None,
        notifiers: Optional[Mapping[str, Notifier]] = None,
    ):
        self._notifiers: Dict[str, Notifier] = {}
        self._default_notifier = default_notifier
        
        for name, notifier in (notifiers or {}).items():
            self.add_notifier(name, notifier)
    
    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Alerts":
        """Create an aggregator using the configured default notifier name."""
        config = config or settings
        return cls(default_notifier=config.HEADSUP_DEFAULT_NOTIFIER)
    
    # -------------------------------------------------------------------------
    # Notifier registry
    # -------------------------------------------------------------------------
    def add_notifier(self, name: str, notifier: Notifier) -> None:
        """Register a notifier, replacing any notifier already registered as ``name``."""
        replaced = name in self._notifiers
        self._notifiers[name] = notifier
        logger.debug("Notifier registered", notifier=name, replaced=replaced)
    
    def remove_notifier(self, name: str) -> None:
        """Unregister a notifier. Unknown names are ignored."""
        if self._notifiers.pop(name, None) is not None:
            logger.debug("Notifier removed", notifier=name)
    
    def notifier(self, name: str) -> Notifier:
        """
        Get a registered notifier.
        
        Raises:
            NotifierNotFoundError: If ``name`` is not registered
        """
        try:
            return self._notifiers[name]
        except KeyError:
            logger.warning("Notifier not found", notifier=name)
            raise NotifierNotFoundError(name) from None
    
    @property
    def notifiers(self) -> Mapping[str, Notifier]:
        """Read-only view of the registered notifiers."""
        return MappingProxyType(self._notifiers)
    
    def set_default_notifier(self, name: Optional[str]) -> None:
        # resolved lazily, the notifier may be registered later
        self._default_notifier = name
    
    def get_default_notifier(self) -> Optional[str]:
        return self._default_notifier
    
    def __getitem__(self, name: str) -> Notifier:
        return self.notifier(name)
    
    def __contains__(self, name: object) -> bool:
        return name in self._notifiers
    
    def __len__(self) -> int:
        return len(self._notifiers)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self._notifiers)
    
    def _resolve(self, name: Optional[str]) -> Tuple[str, Notifier]:
        target = name if name is not None else self._default_notifier
        
        if target is None:
            logger.error("No notifier to route alert to")
            raise NotifierConfigurationError(
                "No notifier given and no default notifier set"
            )
        
        if target not in self._notifiers:
            logger.error("Notifier not registered", notifier=target, default=name is None)
            raise NotifierConfigurationError(
                f"Notifier is not registered: {target}",
                notifier=target,
            )
        
        return target, self._notifiers[target]
    
    # -------------------------------------------------------------------------
    # Raising alerts
    # -------------------------------------------------------------------------
    def alert(
        self,
        messages: Any,
        type: str,
        area: Optional[str] = None,
        is_flash: bool = False,
        extra: Optional[str] = None,
        notifier: Optional[str] = None,
    ) -> None:
        """
        Send messages to a notifier.
        
        Args:
            messages: A message, a list of messages or a validation error bag
            type: Severity tag
            area: Display zone, defaults to HEADSUP_DEFAULT_AREA (HEADSUP_FORM_AREA for error bags)
            is_flash: Hint forwarded to the notifier
            extra: Hint forwarded to the notifier
            notifier: Target notifier name, defaults to the default notifier
            
        Raises:
            NotifierConfigurationError: If no notifier can be resolved
        """
        if isinstance(type, Enum):
            type = type.value
        
        name, target = self._resolve(notifier)
        target.alert(messages, type, area, is_flash, extra)
        
        record_alert(
            notifier=name,
            type=type,
            area=area if area is not None else settings.HEADSUP_DEFAULT_AREA,
        )
        logger.debug("Alert raised", notifier=name, type=type, area=area, is_flash=is_flash)
    
    def error(
        self,
        messages: Any,
        area: Optional[str] = None,
        is_flash: bool = False,
        extra: Optional[str] = None,
        notifier: Optional[str] = None,
    ) -> None:
        self.alert(messages, AlertType.ERROR, area, is_flash, extra, notifier)
    
    def warning(
        self,
        messages: Any,
        area: Optional[str] = None,
        is_flash: bool = False,
        extra: Optional[str] = None,
        notifier: Optional[str] = None,
    ) -> None:
        self.alert(messages, AlertType.WARNING, area, is_flash, extra, notifier)
    
    def success(
        self,
        messages: Any,
        area: Optional[str] = None,
        is_flash: bool = False,
        extra: Optional[str] = None,
        notifier: Optional[str] = None,
    ) -> None:
        self.alert(messages, AlertType.SUCCESS, area, is_flash, extra, notifier)
    
    def info(
        self,
        messages: Any,
        area: Optional[str] = None,
        is_flash: bool = False,
        extra: Optional[str] = None,
        notifier: Optional[str] = None,
    ) -> None:
        self.alert(messages, AlertType.INFO, area, is_flash, extra, notifier)
    
    def form(
        self,
        field: str,
        message: Optional[Any] = None,
        default: Optional[Any] = None,
        notifier: Optional[str] = None,
    ) -> Any:
        """
        Look up a form field error on a notifier supporting form errors.
        
        Raises:
            NotifierConfigurationError: If no notifier can be resolved or it has no form support
        """
        name, target = self._resolve(notifier)
        
        lookup = getattr(target, "form", None)
        if not callable(lookup):
            raise NotifierConfigurationError(
                f"Notifier does not support form errors: {name}",
                notifier=name,
            )
        return lookup(field, message, default)
    
    # -------------------------------------------------------------------------
    # Querying
    # -------------------------------------------------------------------------
    def collect(self) -> List[Message]:
        """Concatenate the messages of every notifier in registration order."""
        messages: List[Message] = []
        for notifier in self._notifiers.values():
            messages.extend(notifier.all())
        return messages
    
    def query(self) -> AlertQuery:
        """Start a new, unfiltered query."""
        return AlertQuery(self)
    
    def where_area(self, area: Any) -> AlertQuery:
        return self.query().where_area(area)
    
    def where_not_area(self, area: Any) -> AlertQuery:
        return self.query().where_not_area(area)
    
    def where_type(self, type: Any) -> AlertQuery:
        return self.query().where_type(type)
    
    def where_not_type(self, type: Any) -> AlertQuery:
        return self.query().where_not_type(type)
    
    def get(self) -> List[Message]:
        return self.query().get()
    
    def all(self) -> List[Message]:
        """Every message of every notifier."""
        record_query(False)
        return self.collect()
    
    def except_area(self, area: Any) -> List[Message]:
        return self.where_not_area(area).get()
