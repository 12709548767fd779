"""
Utility helpers for running the signup example end-to-end.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Tuple

from fieldcheck.utils.logging import get_logger, set_correlation_id

from .forms import validate_signup

logger = get_logger("examples.signup")


def handle_signup(payload: Mapping[str, Any], *, request_id: str | None = None) -> Tuple[int, str]:
    """
    Validate a signup payload the way an HTTP handler would.

    Returns a status code and a JSON body: ``201`` with the accepted user or
    ``422`` with the field-error mapping.
    """

    set_correlation_id(request_id)
    validator = validate_signup(payload)
    if not validator.is_valid():
        logger.info("Rejected signup with %d field error(s)", len(validator.errors))
        return 422, json.dumps({"error": validator.errors}, sort_keys=True)
    user = {"username": payload["username"], "email": payload["email"], "plan": payload["plan"]}
    logger.info("Accepted signup for %s", user["username"])
    return 201, json.dumps({"user": user}, sort_keys=True)


def run_demo() -> List[Dict[str, Any]]:
    payloads = [
        {"username": "alice_c", "email": "alice@example.com", "plan": "team", "interests": ["go", "python"]},
        {"username": "B!", "email": "brian.example.com", "plan": "gold", "interests": ["sql", "sql"]},
    ]
    results = []
    for index, payload in enumerate(payloads, start=1):
        status, body = handle_signup(payload, request_id=f"demo-{index}")
        results.append({"status": status, "body": json.loads(body)})
    return results


if __name__ == "__main__":
    for result in run_demo():
        print(result)
