"""
Heads Up - Core Schemas
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class AlertType(str, Enum):
    """Conventional alert severities. Any other string is accepted as a type."""
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"


class AlertPayload(BaseModel):
    """Serialized form of a single alert message."""
    text: Any = Field(..., description="Message text or structured payload")
    type: str = Field(..., description="Severity tag (error, warning, success, info)")
    area: Optional[str] = Field(None, description="Display zone, defaults to HEADSUP_DEFAULT_AREA")
    extra: Optional[str] = Field(None, description="Sub-key, e.g. the form field name")
