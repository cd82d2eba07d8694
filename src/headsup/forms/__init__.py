"""Forms module - Validation error bag normalization."""

from headsup.forms.errors import first_errors, is_error_bag, normalize_error_bag

__all__ = [
    "first_errors",
    "is_error_bag",
    "normalize_error_bag",
]
