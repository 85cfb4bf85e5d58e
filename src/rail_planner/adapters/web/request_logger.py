"""Logging of incoming API requests when RP_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-admin-token", "x-api-key"})
# Traveller fields redacted from logged booking payloads
SENSITIVE_FIELDS = frozenset({"idNumber", "id_number"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via the RP_LOG_REQUESTS environment variable."""
    return os.getenv("RP_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def _redact_payload(payload: Any) -> Any:
    if isinstance(payload, dict):
        return {
            k: "***REDACTED***" if k in SENSITIVE_FIELDS else _redact_payload(v)
            for k, v in payload.items()
        }
    if isinstance(payload, list):
        return [_redact_payload(item) for item in payload]
    return payload


def _format_payload(payload: Any) -> str:
    try:
        return json.dumps(_redact_payload(payload), indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    path: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log an incoming API request if RP_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        path: Request path.
        params: Query parameters (optional).
        headers: Request headers (optional, sensitive headers are redacted).
        payload: Parsed request body (optional, traveller ID numbers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {path}"]
    if params:
        log_parts.append(f"Params: {json.dumps(params, sort_keys=True, ensure_ascii=False)}")
    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact_sensitive_headers(headers), indent=2)}")
    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
