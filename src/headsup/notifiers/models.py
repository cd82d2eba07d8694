"""
Heads Up - Message Model

Immutable value object stored by notifier backends.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from headsup.core.config import settings
from headsup.core.schemas import AlertPayload


@dataclass(frozen=True)
class Message:
    """A single alert message."""
    
    text: Any
    type: str
    area: Optional[str] = None  # None resolves to HEADSUP_DEFAULT_AREA
    extra: Optional[str] = None  # form field name for mapped validation errors
    
    def __post_init__(self) -> None:
        if isinstance(self.type, Enum):
            object.__setattr__(self, "type", self.type.value)
        if self.area is None:
            object.__setattr__(self, "area", settings.HEADSUP_DEFAULT_AREA)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return AlertPayload(
            text=self.text,
            type=self.type,
            area=self.area,
            extra=self.extra,
        ).model_dump()
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        """Create a message from its dictionary form."""
        payload = AlertPayload.model_validate(data)
        return cls(
            text=payload.text,
            type=payload.type,
            area=payload.area,
            extra=payload.extra,
        )
