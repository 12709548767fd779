"""
Field-error accumulator used while validating a request payload.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from ..utils.logging import get_logger
from .errors import ValidationError


class Validator:
    """
    Collects at most one error message per field.

    The first message recorded for a field is kept; later messages for the
    same field are discarded. Instances are not thread-safe, so create one per
    request.
    """

    def __init__(self, errors: Optional[Mapping[str, str]] = None) -> None:
        self.errors: Dict[str, str] = dict(errors) if errors else {}
        self._logger = get_logger("validation.validator")

    def __repr__(self) -> str:
        return f"Validator(errors={self.errors!r})"

    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field: str, message: str) -> None:
        if not isinstance(field, str):
            raise TypeError("Field name must be a string.")
        if field in self.errors:
            self._logger.debug("Discarding additional error for field %s: %s", field, message)
            return
        self.errors[field] = message
        self._logger.debug("Recorded error for field %s: %s", field, message)

    def check(self, ok: bool, field: str, message: str) -> None:
        if not ok:
            self.add_error(field, message)

    def raise_if_invalid(self) -> None:
        """
        Raise :class:`ValidationError` carrying a copy of the recorded errors.
        """
        if self.errors:
            raise ValidationError(self.errors)
