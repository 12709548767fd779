"""
Request payload rules for the signup example.
"""

from __future__ import annotations

from typing import Any, Mapping

from fieldcheck import EMAIL_RX, Validator, matches, permitted_value, unique

ALLOWED_PLANS = ("free", "team", "enterprise")
USERNAME_RX = r"^[a-z0-9_]{3,30}$"


def validate_signup(payload: Mapping[str, Any]) -> Validator:
    validator = Validator()

    username = str(payload.get("username") or "")
    validator.check(username != "", "username", "must be provided")
    validator.check(matches(username, USERNAME_RX), "username", "must be 3-30 lowercase letters, digits or underscores")

    email = str(payload.get("email") or "")
    validator.check(email != "", "email", "must be provided")
    validator.check(matches(email, EMAIL_RX), "email", "must be a valid email address")

    plan = str(payload.get("plan") or "")
    validator.check(permitted_value(plan, *ALLOWED_PLANS), "plan", "must be one of: " + ", ".join(ALLOWED_PLANS))

    interests = payload.get("interests") or []
    validator.check(
        isinstance(interests, list) and all(isinstance(item, str) for item in interests),
        "interests",
        "must be a list of strings",
    )
    if "interests" not in validator.errors:
        validator.check(len(interests) <= 5, "interests", "must not contain more than 5 entries")
        validator.check(unique(interests), "interests", "must not contain duplicate values")

    return validator
