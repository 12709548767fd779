"""
fieldcheck public package initialization.

Exposes the field-error accumulator and the predicate helpers used to
populate it.
"""

from .validation import (  # noqa: F401
    EMAIL_RX,
    ValidationError,
    Validator,
    matches,
    permitted_value,
    unique,
)

__all__ = [
    "EMAIL_RX",
    "ValidationError",
    "Validator",
    "matches",
    "permitted_value",
    "unique",
]
