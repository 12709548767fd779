"""
Stateless predicate helpers used to populate a :class:`Validator`.
"""

from __future__ import annotations

import re
from typing import Hashable, Iterable

# Local part from the RFC 5322 atext set, then dot-separated domain labels
# ending in an alphabetic TLD of at least two characters.
EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+"
    r"[a-zA-Z]{2,}\Z"
)


def permitted_value(value: str, *permitted: str) -> bool:
    """
    Return ``True`` when ``value`` equals one of ``permitted``.
    """
    return any(value == candidate for candidate in permitted)


def matches(value: str, pattern: re.Pattern[str] | str) -> bool:
    """
    Return ``True`` when ``pattern`` finds a match in ``value``.

    Anchoring is left to the pattern itself: ``EMAIL_RX`` is anchored at both
    ends, an unanchored pattern matches anywhere in the string.
    """
    if not isinstance(value, str):
        raise TypeError("Value must be a string for matches().")
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return compiled.search(value) is not None


def unique(values: Iterable[Hashable]) -> bool:
    seen = set()
    for value in values:
        if value in seen:
            return False
        seen.add(value)
    return True
