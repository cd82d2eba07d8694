"""
Heads Up - Validation Error Bags

An error bag is anything enumerable as field name -> one or more error
strings:

- a mapping such as ``{"email": "Required"}`` or ``{"email": ["Required", "Invalid"]}``
- a pydantic ``ValidationError`` (field name is the dotted ``loc``)
- an object exposing a ``messages()`` method that returns such a mapping
"""

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError

ROOT_FIELD = "__root__"


def is_error_bag(value: Any) -> bool:
    """Check whether a value can be mapped to per-field errors."""
    if isinstance(value, (Mapping, ValidationError)):
        return True
    return callable(getattr(value, "messages", None))


def _from_validation_error(exc: ValidationError) -> Dict[str, List[str]]:
    bag: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or ROOT_FIELD
        bag.setdefault(field, []).append(error.get("msg", ""))
    return bag


def _as_list(errors: Any) -> List[str]:
    if errors is None:
        return []
    if isinstance(errors, str):
        return [errors]
    if isinstance(errors, (list, tuple, set, frozenset)):
        return [str(error) for error in errors]
    return [str(errors)]


def normalize_error_bag(bag: Any) -> Dict[str, List[str]]:
    """
    Convert an error bag into a plain ``{field: [errors, ...]}`` dict.
    
    Fields without any error are dropped. Field order is preserved.
    
    Raises:
        TypeError: If the value is not an error bag
    """
    if isinstance(bag, ValidationError):
        return _from_validation_error(bag)
    
    if not isinstance(bag, Mapping) and callable(getattr(bag, "messages", None)):
        bag = bag.messages()
    
    if not isinstance(bag, Mapping):
        raise TypeError(f"Unsupported error bag: {type(bag).__name__}")
    
    normalized: Dict[str, List[str]] = {}
    for field, errors in bag.items():
        items = _as_list(errors)
        if items:
            normalized[str(field)] = items
    return normalized


def first_errors(bag: Any) -> Dict[str, str]:
    """Map each field of an error bag to its first error."""
    return {field: errors[0] for field, errors in normalize_error_bag(bag).items()}
