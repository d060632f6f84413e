"""
API Gateway proxy response helpers.

Every response carries JSON content type and permissive CORS headers so
browser clients can call the endpoints directly.
"""

import json
from typing import Any, Dict

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def json_response(status_code: int, payload: Any) -> Dict[str, Any]:
    """Build an API Gateway proxy response."""
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(payload),
    }


def error_response(status_code: int, error: str, message: str) -> Dict[str, Any]:
    return json_response(status_code, {"error": error, "message": message})


def method_not_allowed(event: Dict[str, Any]) -> Dict[str, Any] | None:
    """Return a 405 response unless the event is a POST (or carries no method)."""
    method = event.get("httpMethod")
    if method and method.upper() != "POST":
        return error_response(405, "MethodNotAllowed", "Method Not Allowed")
    return None


def parse_body(body: Any) -> Dict[str, Any]:
    """
    Decode a request body into a dict.

    Missing, malformed or non-object bodies decode to an empty dict so the
    caller's own validation reports what is missing.
    """
    if not body:
        return {}
    if isinstance(body, dict):
        return body
    try:
        parsed = json.loads(body)
    except (TypeError, ValueError):
        return {}
    return parsed if isinstance(parsed, dict) else {}
