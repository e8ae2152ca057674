"""Authenticated HTTP client for the car wash backend"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

import settings
from carwash_auth.credentials import CredentialStore
from carwash_auth.models import CredentialPair
from utils.formatting import clean_params
from utils.storage import TokenStorage
from .errors import ApiError, SessionExpiredError, TransportError
from .logging_utils import log_request, log_response
from .token_refresh import refresh_tokens

logger = logging.getLogger(__name__)

# Attempt numbers threaded through _send; the resubmit after a refresh is the last one
FIRST_ATTEMPT = 0
RESUBMIT_ATTEMPT = 1


@dataclass(frozen=True)
class ClientSettings:
    base_url: str
    api_version: str = "v1"
    request_timeout: float = 30.0
    connect_timeout: float = 10.0
    token_file: Optional[str] = None
    login_path: str = "/login"

    @property
    def api_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/{self.api_version}"

    @classmethod
    def from_settings(cls) -> "ClientSettings":
        return cls(
            base_url=settings.API_BASE_URL,
            api_version=settings.API_VERSION,
            request_timeout=settings.REQUEST_TIMEOUT,
            connect_timeout=settings.CONNECT_TIMEOUT,
            token_file=settings.TOKEN_FILE,
            login_path=settings.LOGIN_PATH,
        )


def _log_session_expired(login_path: str) -> None:
    logger.warning(f"Session expired, sign in again at {login_path}")


class ApiClient:
    """Sends calls to the versioned API and recovers from one expired access token

    Every call carries the stored access token as a bearer credential. A 401
    on the first attempt triggers a single refresh (shared with any other
    request that hits a 401 meanwhile) and one resubmit; anything else is
    raised to the caller as ApiError.
    """

    def __init__(
        self,
        client_settings: Optional[ClientSettings] = None,
        credentials: Optional[CredentialStore] = None,
        on_session_expired: Optional[Callable[[str], None]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = client_settings or ClientSettings.from_settings()
        self.credentials = credentials or CredentialStore(TokenStorage(self.settings.token_file))
        self._on_session_expired = on_session_expired or _log_session_expired
        self._refresh_task: Optional[asyncio.Task] = None
        self._http = httpx.AsyncClient(
            base_url=self.settings.api_url,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            timeout=httpx.Timeout(self.settings.request_timeout, connect=self.settings.connect_timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # Credential management

    def set_credentials(self, access_token: str, refresh_token: str) -> None:
        self.credentials.set(access_token, refresh_token)

    def clear_credentials(self) -> None:
        self.credentials.clear()

    def get_credentials(self) -> CredentialPair:
        return self.credentials.get()

    # Requests

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        recover: bool = True,
    ) -> Any:
        """Send a call and return the decoded response envelope

        With ``recover=False`` a 401 is raised as is, without a refresh;
        used by calls that issue credentials rather than present them.

        Raises:
            ApiError: non-2xx response, carrying the backend's envelope
            TransportError: no response within the timeout or network failure
            SessionExpiredError: 401 with no refresh token to recover with
        """
        response = await self._send(method.upper(), path, body, clean_params(query), FIRST_ATTEMPT, recover)
        return self._decode(response)

    async def request_raw(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> bytes:
        """Like request() but returns the undecoded body, for file downloads"""
        response = await self._send(method.upper(), path, body, clean_params(query), FIRST_ATTEMPT)
        return response.content

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("GET", path, query=query)

    async def post(
        self, path: str, body: Any = None, query: Optional[Mapping[str, Any]] = None, recover: bool = True
    ) -> Any:
        return await self.request("POST", path, body=body, query=query, recover=recover)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def patch(self, path: str, body: Any = None) -> Any:
        return await self.request("PATCH", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def refresh(self) -> CredentialPair:
        """Refresh the stored pair explicitly, expiring the session on failure"""
        await self._refresh_once()
        return self.credentials.get()

    def _bearer_headers(self, access_token: Optional[str]) -> Dict[str, str]:
        if not access_token:
            return {}
        return {"Authorization": f"Bearer {access_token}"}

    async def _send(
        self,
        method: str,
        path: str,
        body: Any,
        query: Dict[str, Any],
        attempt: int,
        recover: bool = True,
    ) -> httpx.Response:
        access_token = self.credentials.get().access_token
        headers = self._bearer_headers(access_token)
        log_request(method, path, attempt, headers, body)

        try:
            response = await self._http.request(
                method,
                path,
                json=body,
                params=query or None,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.error(f"{method} {path} timed out after {self.settings.request_timeout}s")
            raise TransportError(f"Request timed out after {self.settings.request_timeout:g}s") from e
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(str(e) or "Network error") from e

        log_response(method, path, response)
        if response.is_success:
            return response

        error = ApiError.from_response(response)
        if response.status_code == 401 and recover and attempt == FIRST_ATTEMPT:
            await self._recover_credentials(access_token, error)
            return await self._send(method, path, body, query, RESUBMIT_ATTEMPT)

        if response.status_code == 401 and recover:
            logger.warning(f"{method} {path} rejected again after credential refresh")
        raise error

    async def _recover_credentials(self, rejected_token: Optional[str], error: ApiError) -> None:
        """Make sure the stored pair is newer than ``rejected_token``"""
        current = self.credentials.get().access_token
        if current and current != rejected_token:
            # Another request already rotated the pair while this one was in flight
            logger.debug("Credentials changed since the request was sent, resubmitting")
            return
        await self._refresh_once(error)

    async def _refresh_once(self, error: Optional[ApiError] = None) -> None:
        """Run the refresh, sharing one in-flight refresh among concurrent callers"""
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.ensure_future(self._refresh_credentials(error))
        else:
            logger.debug("Joining token refresh already in flight")
        # A cancelled waiter must not cancel the refresh the others are waiting on
        await asyncio.shield(self._refresh_task)

    async def _refresh_credentials(self, error: Optional[ApiError]) -> None:
        refresh_token = self.credentials.get().refresh_token
        if not refresh_token:
            logger.warning("No refresh token available")
            self._expire_session()
            raise SessionExpiredError(error.envelope if error else None) from error

        try:
            pair = await refresh_tokens(self._http, refresh_token)
        except ApiError as refresh_error:
            self._expire_session()
            raise refresh_error from error

        self.credentials.set(pair.access_token, pair.refresh_token)

    def _expire_session(self) -> None:
        self.credentials.clear()
        self._on_session_expired(self.settings.login_path)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"success": True, "data": response.text}
