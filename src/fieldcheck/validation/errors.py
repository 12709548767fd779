"""
Validation error raised on demand from a populated validator.
"""

from __future__ import annotations

from typing import Dict, Mapping


class ValidationError(Exception):
    """
    Aggregated validation error storing the field-to-message mapping.
    """

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors: Dict[str, str] = dict(errors)
        message = self._format_message()
        super().__init__(message)

    def _format_message(self) -> str:
        return "; ".join(f"{field}: {message}" for field, message in self.errors.items())
