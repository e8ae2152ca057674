"""In-memory credential cache mirrored into durable storage"""

import logging
from typing import Optional, Protocol, Dict

from utils.storage import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, TokenStorage
from .jwt_utils import get_token_expiry, describe_time_until
from .models import CredentialPair

logger = logging.getLogger(__name__)


class DurableTokenStore(Protocol):
    def save_tokens(self, access_token: str, refresh_token: str) -> None: ...

    def load_tokens(self) -> Optional[Dict[str, str]]: ...

    def clear_tokens(self) -> None: ...

    @property
    def location(self) -> str: ...


class CredentialStore:
    """Process-wide credential pair with a hydrate-once durable mirror

    The durable store is read at most once per process, on the first
    ``get()``; afterwards memory is authoritative. Writes go to both.
    """

    def __init__(self, storage: Optional[DurableTokenStore] = None):
        self.storage = storage if storage is not None else TokenStorage()
        self._pair = CredentialPair.absent()
        self._hydrated = False

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    def hydrate(self) -> CredentialPair:
        """Load the durable pair into memory (no-op once hydrated)"""
        if self._hydrated:
            return self._pair

        data = self.storage.load_tokens()
        if data:
            self._pair = CredentialPair(
                access_token=data[ACCESS_TOKEN_KEY],
                refresh_token=data[REFRESH_TOKEN_KEY],
            )
            logger.debug(f"Restored credentials from {self.storage.location}")
        self._hydrated = True
        return self._pair

    def get(self) -> CredentialPair:
        return self.hydrate()

    def set(self, access_token: str, refresh_token: str) -> None:
        """Store both tokens in memory and durably, replacing prior values"""
        if not access_token or not refresh_token:
            raise ValueError("Both access and refresh tokens are required")

        self._pair = CredentialPair(access_token=access_token, refresh_token=refresh_token)
        self._hydrated = True
        self.storage.save_tokens(access_token, refresh_token)

    def clear(self) -> None:
        """Forget both tokens in memory and in the durable store"""
        self._pair = CredentialPair.absent()
        self._hydrated = True
        self.storage.clear_tokens()
        logger.debug("Cleared stored credentials")

    def get_status(self) -> dict:
        """Credential status without exposing secrets"""
        pair = self.get()
        if not pair.is_present:
            return {
                "has_tokens": False,
                "is_expired": True,
                "expires_at": None,
                "time_until_expiry": "No tokens",
                "location": self.storage.location,
            }

        expires_at = get_token_expiry(pair.access_token)
        time_until_expiry = describe_time_until(expires_at)
        return {
            "has_tokens": True,
            "is_expired": time_until_expiry == "expired",
            "expires_at": expires_at.isoformat() if expires_at else None,
            "time_until_expiry": time_until_expiry,
            "location": self.storage.location,
        }
