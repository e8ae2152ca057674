"""
JWT payload decoding for displaying access token expiry
"""
import base64
import binascii
import datetime
import json
import logging
from typing import Dict, Optional, Any

logger = logging.getLogger(__name__)


def decode_jwt(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode JWT token without verification.

    Note: This only decodes the payload, the signature is the backend's concern.

    Args:
        token: JWT access token

    Returns:
        Decoded JWT payload as dictionary, or None if invalid
    """
    parts = token.split(".") if token else []
    if len(parts) != 3:
        logger.debug(f"Invalid JWT format: expected 3 parts, got {len(parts)}")
        return None

    payload = parts[1]

    # Add padding if needed (JWT uses base64url without padding)
    padding = 4 - (len(payload) % 4)
    if padding != 4:
        payload += "=" * padding

    try:
        decoded = json.loads(base64.urlsafe_b64decode(payload).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.debug(f"Error decoding JWT: {e}")
        return None

    return decoded if isinstance(decoded, dict) else None


def get_token_expiry(token: str) -> Optional[datetime.datetime]:
    """Return the ``exp`` claim of a JWT as an aware UTC datetime"""
    claims = decode_jwt(token) or {}
    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    try:
        return datetime.datetime.fromtimestamp(float(exp), datetime.timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def describe_time_until(expires_at: Optional[datetime.datetime]) -> str:
    """Render the time left before ``expires_at`` as e.g. '2h 5m' or 'expired'"""
    if expires_at is None:
        return "unknown"

    now = datetime.datetime.now(datetime.timezone.utc)
    remaining = int((expires_at - now).total_seconds())
    if remaining <= 0:
        return "expired"

    hours = remaining // 3600
    minutes = (remaining % 3600) // 60
    days = hours // 24
    if days > 0:
        return f"{days}d {hours % 24}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
