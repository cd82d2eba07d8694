"""
Heads Up - Alert Query

Immutable filter builder over the messages of every registered notifier.
Each ``where_*`` call returns a new query, so a query can be kept and
reused without affecting other queries built from the same aggregator.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, FrozenSet, List, Optional, Tuple

from headsup.notifiers.models import Message
from headsup.observability.metrics import record_query

if TYPE_CHECKING:
    from headsup.alerts.service import Alerts


def _values(value: Any) -> FrozenSet[str]:
    """Normalize a single area/type or an iterable of them to a set of strings."""
    if isinstance(value, (str, Enum)):
        value = [value]
    return frozenset(item.value if isinstance(item, Enum) else str(item) for item in value)


@dataclass(frozen=True)
class AlertQuery:
    """
    Chainable area/type filters.
    
    Values passed to one call are OR-ed; separate calls are AND-ed:
    ``where_area("header").where_type(["error", "warning"])`` keeps header
    messages that are errors or warnings.
    """
    
    alerts: "Alerts" = field(repr=False, compare=False)
    areas: Tuple[FrozenSet[str], ...] = ()
    excluded_areas: FrozenSet[str] = frozenset()
    types: Tuple[FrozenSet[str], ...] = ()
    excluded_types: FrozenSet[str] = frozenset()
    
    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------
    def where_area(self, area: Any) -> "AlertQuery":
        return replace(self, areas=self.areas + (_values(area),))
    
    def where_not_area(self, area: Any) -> "AlertQuery":
        return replace(self, excluded_areas=self.excluded_areas | _values(area))
    
    def where_type(self, type: Any) -> "AlertQuery":
        return replace(self, types=self.types + (_values(type),))
    
    def where_not_type(self, type: Any) -> "AlertQuery":
        return replace(self, excluded_types=self.excluded_types | _values(type))
    
    @property
    def is_filtered(self) -> bool:
        return bool(self.areas or self.excluded_areas or self.types or self.excluded_types)
    
    def matches(self, message: Message) -> bool:
        """Check a message against every active filter."""
        if any(message.area not in allowed for allowed in self.areas):
            return False
        if message.area in self.excluded_areas:
            return False
        if any(message.type not in allowed for allowed in self.types):
            return False
        if message.type in self.excluded_types:
            return False
        return True
    
    # -------------------------------------------------------------------------
    # Retrieval
    # -------------------------------------------------------------------------
    def get(self) -> List[Message]:
        """Messages of all notifiers, in registration order, passing every filter."""
        record_query(self.is_filtered)
        return [message for message in self.alerts.collect() if self.matches(message)]
    
    def all(self) -> List[Message]:
        """Messages of all notifiers, ignoring the filters."""
        return self.alerts.all()
    
    def except_area(self, area: Any) -> List[Message]:
        return self.where_not_area(area).get()
    
    def first(self) -> Optional[Message]:
        matched = self.get()
        return matched[0] if matched else None
    
    def count(self) -> int:
        return len(self.get())
    
    def exists(self) -> bool:
        return bool(self.get())
