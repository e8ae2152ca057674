"""
Logging utilities for request debugging and tracing.
"""
import logging
from typing import Any, Mapping, Optional

import httpx

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}
SENSITIVE_FIELDS = {"password", "currentPassword", "newPassword", "refreshToken", "token"}


def redact_headers(headers: Optional[Mapping[str, str]]) -> dict:
    return {
        name: "[REDACTED]" if name.lower() in SENSITIVE_HEADERS else value
        for name, value in (headers or {}).items()
    }


def redact_body(body: Any) -> Any:
    if not isinstance(body, dict):
        return body
    return {key: "[REDACTED]" if key in SENSITIVE_FIELDS else value for key, value in body.items()}


def log_request(method: str, path: str, attempt: int, headers: Optional[Mapping[str, str]] = None, body: Any = None):
    """Log an outbound call with secrets redacted"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    suffix = " (resubmit after refresh)" if attempt else ""
    logger.debug(f"--> {method} {path}{suffix}")
    if headers:
        logger.debug(f"    headers: {redact_headers(headers)}")
    if body is not None:
        logger.debug(f"    body: {redact_body(body)}")


def log_response(method: str, path: str, response: httpx.Response):
    logger.debug(f"<-- {method} {path} {response.status_code} ({len(response.content)} bytes)")
