"""Opt-in logging of outgoing upstream requests (TDS_LOG_REQUESTS=true)."""

import json
import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"

# openrouteservice takes its key as a query parameter on geocoding and as a
# header on directions.
SECRET_PARAMS = frozenset({"api_key"})
SECRET_HEADERS = frozenset({"authorization"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via the TDS_LOG_REQUESTS environment variable."""
    return os.getenv("TDS_LOG_REQUESTS", "").lower() == "true"


def _redact(values: Mapping[str, Any], secret_keys: frozenset[str]) -> dict[str, Any]:
    return {k: REDACTED if k.lower() in secret_keys else v for k, v in values.items()}


def _url_with_query(url: str, params: Mapping[str, Any] | None) -> str:
    if not params:
        return url
    query = "&".join(f"{k}={v}" for k, v in sorted(_redact(params, SECRET_PARAMS).items()))
    return f"{url}?{query}"


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log an outgoing request with its secrets redacted.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters, ``api_key`` is redacted.
        headers: Request headers, ``Authorization`` is redacted.
        payload: JSON request body.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {_url_with_query(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(_redact(headers, SECRET_HEADERS), indent=2)}")
    if payload is not None:
        lines.append(f"Payload: {json.dumps(payload, indent=2, ensure_ascii=False)}")

    logger.info("API Request:\n" + "\n".join(lines))
