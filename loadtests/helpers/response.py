"""Response error extraction for load test observability.

Parses Reviews API error responses into human-readable messages.
Handles these response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Rule violations (400): {"error": "Validation failed", "violations": [{"field": ..., "message": ...}]}
- Other errors (400/499/503): {"error": "msg"}, {"error": {"field": [...]}} or {"detail": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response."""
    try:
        body = response.json()
    except Exception:
        # Not JSON, return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if "violations" in body:
        return " | ".join(f"{v.get('field')}: {v.get('message')}" for v in body["violations"])

    if "detail" in body:
        detail = body["detail"]
        if isinstance(detail, list):
            parts = []
            for err in detail:
                loc = ".".join(str(p) for p in err.get("loc", []))
                msg = err.get("msg", str(err))
                parts.append(f"{loc}: {msg}" if loc else msg)
            return " | ".join(parts)
        return str(detail)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(f"{k}: {v}" for k, v in error.items())
        return str(error)

    # Unknown shape, stringify and truncate
    return str(body)[:300]
