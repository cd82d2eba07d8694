"""
Heads Up - Custom Exceptions
"""

from typing import Any, Dict, Optional


class HeadsUpError(Exception):
    """Base exception for Heads Up."""
    
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(HeadsUpError):
    """Raised when a resource is not found."""
    
    def __init__(self, resource: str, identifier: str):
        super().__init__(
            message=f"{resource} not found: {identifier}",
            code="NOT_FOUND",
            details={"resource": resource, "identifier": identifier},
        )


class ConfigurationError(HeadsUpError):
    """Raised when the runtime wiring is incomplete or inconsistent."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class NotifierNotFoundError(NotFoundError):
    """Raised when a notifier name was never registered."""
    
    def __init__(self, name: str):
        super().__init__(resource="Notifier", identifier=name)
        self.name = name


class NotifierConfigurationError(ConfigurationError):
    """Raised when no notifier can be resolved for an operation."""
    
    def __init__(self, message: str, notifier: Optional[str] = None):
        super().__init__(message, details={"notifier": notifier})
        self.notifier = notifier
