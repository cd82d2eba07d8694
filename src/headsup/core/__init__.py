"""Core module - Configuration, exceptions, logging, and schemas."""

from headsup.core.config import get_settings, settings
from headsup.core.exceptions import (
    ConfigurationError,
    HeadsUpError,
    NotFoundError,
    NotifierConfigurationError,
    NotifierNotFoundError,
)
from headsup.core.schemas import AlertPayload, AlertType

__all__ = [
    # Config
    "get_settings",
    "settings",
    # Exceptions
    "ConfigurationError",
    "HeadsUpError",
    "NotFoundError",
    "NotifierConfigurationError",
    "NotifierNotFoundError",
    # Schemas
    "AlertPayload",
    "AlertType",
]
