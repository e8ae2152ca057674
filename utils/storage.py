import json
import logging
import os
import platform
from pathlib import Path
from typing import Optional, Dict

from settings import TOKEN_FILE

logger = logging.getLogger(__name__)

# Fixed keys of the durable credential entries
ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"


class TokenStorage:
    """Durable credential storage in a JSON file with restrictive permissions"""

    def __init__(self, token_file: Optional[str] = None):
        self.token_path = Path(token_file if token_file else TOKEN_FILE)

    def _ensure_secure_directory(self):
        """Create parent directory with secure permissions"""
        parent_dir = self.token_path.parent
        if not parent_dir.exists():
            parent_dir.mkdir(parents=True, exist_ok=True)
            # Set directory permissions to 700 on Unix-like systems
            if platform.system() != "Windows":
                os.chmod(parent_dir, 0o700)

    def save_tokens(self, access_token: str, refresh_token: str):
        """Persist both tokens, overwriting any prior values"""
        self._ensure_secure_directory()
        data = {
            ACCESS_TOKEN_KEY: access_token,
            REFRESH_TOKEN_KEY: refresh_token,
        }

        self.token_path.write_text(json.dumps(data, indent=2))

        # Set file permissions to 600 on Unix-like systems
        if platform.system() != "Windows":
            os.chmod(self.token_path, 0o600)
        logger.debug(f"Saved tokens to {self.token_path}")

    def load_tokens(self) -> Optional[Dict[str, str]]:
        """Load tokens from storage, None when absent or unreadable"""
        if not self.token_path.exists():
            return None

        try:
            data = json.loads(self.token_path.read_text())
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable token file {self.token_path}: {e}")
            return None

        if not isinstance(data, dict):
            return None
        access_token = data.get(ACCESS_TOKEN_KEY)
        refresh_token = data.get(REFRESH_TOKEN_KEY)
        # Half a pair is treated as no pair at all
        if not access_token or not refresh_token:
            return None
        return {ACCESS_TOKEN_KEY: access_token, REFRESH_TOKEN_KEY: refresh_token}

    def clear_tokens(self):
        """Remove stored tokens"""
        if self.token_path.exists():
            self.token_path.unlink()
            logger.debug(f"Removed token file {self.token_path}")

    def has_tokens(self) -> bool:
        return self.load_tokens() is not None

    @property
    def location(self) -> str:
        """Human readable location of the stored tokens"""
        return str(self.token_path)


class MemoryTokenStorage:
    """Process-local stand-in for TokenStorage, used when nothing may touch disk"""

    def __init__(self, tokens: Optional[Dict[str, str]] = None):
        self._data: Optional[Dict[str, str]] = dict(tokens) if tokens else None
        self.loads = 0

    def save_tokens(self, access_token: str, refresh_token: str):
        self._data = {ACCESS_TOKEN_KEY: access_token, REFRESH_TOKEN_KEY: refresh_token}

    def load_tokens(self) -> Optional[Dict[str, str]]:
        self.loads += 1
        return dict(self._data) if self._data else None

    def clear_tokens(self):
        self._data = None

    def has_tokens(self) -> bool:
        return self._data is not None

    @property
    def location(self) -> str:
        return "memory"
