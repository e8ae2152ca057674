"""Data models for car wash authentication"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CredentialPair:
    """Access/refresh token pair

    Attributes:
        access_token: Short-lived bearer token attached to every API call
        refresh_token: Longer-lived token used only to obtain a new pair
    """
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def is_present(self) -> bool:
        return bool(self.access_token and self.refresh_token)

    @classmethod
    def absent(cls) -> "CredentialPair":
        return cls()
