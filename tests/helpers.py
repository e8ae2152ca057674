"""Response builders and a client factory shared by the tests"""

from __future__ import annotations

import base64
import json
import time
from typing import Callable, Dict, Optional

import httpx

from carwash_api.client import ApiClient, ClientSettings
from carwash_auth.credentials import CredentialStore
from utils.storage import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, MemoryTokenStorage

API_ROOT = "http://carwash.test"
API_PREFIX = "/api/v1"


def ok(data=None, status_code: int = 200, **extra) -> httpx.Response:
    return httpx.Response(status_code, json={"success": True, "data": data, **extra})


def fail(status_code: int, error: str, **extra) -> httpx.Response:
    return httpx.Response(status_code, json={"success": False, "error": error, **extra})


def refreshed(access_token: str, refresh_token: str) -> httpx.Response:
    return ok({"tokens": {"accessToken": access_token, "refreshToken": refresh_token}})


def api_path(request: httpx.Request) -> str:
    """Request path relative to the versioned API root"""
    path = request.url.path
    return path[len(API_PREFIX):] if path.startswith(API_PREFIX) else path


def json_body(request: httpx.Request):
    return json.loads(request.content) if request.content else None


def make_jwt(expires_in: int = 3600) -> str:
    def encode(part: Dict) -> str:
        return base64.urlsafe_b64encode(json.dumps(part).encode()).decode().rstrip("=")

    header = encode({"alg": "HS256", "typ": "JWT"})
    payload = encode({"sub": "user-1", "exp": int(time.time()) + expires_in})
    return f"{header}.{payload}.signature"


class ClientFactory:
    """Builds ApiClients whose transport is a handler function"""

    def __init__(self):
        self.expired_calls = []
        self.storage: Optional[MemoryTokenStorage] = None
        self.credentials: Optional[CredentialStore] = None

    def __call__(
        self,
        handler: Callable[[httpx.Request], httpx.Response],
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
    ) -> ApiClient:
        tokens = None
        if access_token and refresh_token:
            tokens = {ACCESS_TOKEN_KEY: access_token, REFRESH_TOKEN_KEY: refresh_token}
        self.storage = MemoryTokenStorage(tokens)
        self.credentials = CredentialStore(self.storage)
        return ApiClient(
            client_settings=ClientSettings(base_url=API_ROOT),
            credentials=self.credentials,
            on_session_expired=self.expired_calls.append,
            transport=httpx.MockTransport(handler),
        )
