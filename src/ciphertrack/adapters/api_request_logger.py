"""Utility for logging live-status traffic when CT_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

# Response bodies longer than this are truncated in the log
MAX_LOGGED_BODY_CHARS = 2000


def should_log_requests() -> bool:
    """Check if request logging is enabled via CT_LOG_REQUESTS environment variable."""
    return os.getenv("CT_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outbound request if CT_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, body: str) -> None:
    """Log a response status and (truncated) body if CT_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    if len(body) > MAX_LOGGED_BODY_CHARS:
        body = f"{body[:MAX_LOGGED_BODY_CHARS]}... ({len(body)} chars)"
    logger.info(f"API Response {status} from {url}:\n{body}")
