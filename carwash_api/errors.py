"""Exceptions raised by the car wash API client"""

from typing import Any, Dict, Optional

import httpx

GENERIC_ERROR = "An unexpected error occurred"


class ApiError(RuntimeError):
    """A failed call, carrying the backend's error envelope verbatim

    Attributes:
        status_code: HTTP status, 0 when no response was received
        envelope: ``{"success": False, "error": ...}`` as sent by the backend
    """

    def __init__(self, status_code: int, envelope: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        self.envelope = envelope or {"success": False, "error": GENERIC_ERROR}
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return str(self.envelope.get("error") or self.envelope.get("message") or GENERIC_ERROR)

    @property
    def details(self) -> Optional[Dict[str, Any]]:
        return self.envelope.get("details")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build the error from a non-2xx response, keeping its envelope if it has one"""
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, dict) and ("error" in payload or "success" in payload):
            envelope = payload
        else:
            envelope = {
                "success": False,
                "error": f"Request failed with status code {response.status_code}",
            }
        return cls(response.status_code, envelope)


class TransportError(ApiError):
    """Network unreachable or timed out; no response was received"""

    def __init__(self, message: str):
        super().__init__(0, {"success": False, "error": message or GENERIC_ERROR})


class SessionExpiredError(ApiError):
    """The access token was rejected and there was nothing to refresh it with"""

    def __init__(self, envelope: Optional[Dict[str, Any]] = None):
        super().__init__(401, envelope or {"success": False, "error": "Session expired, please log in again"})
