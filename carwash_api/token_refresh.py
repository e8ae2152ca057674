"""Access token refresh against the backend's /auth/refresh endpoint"""

import logging

import httpx

from carwash_auth.models import CredentialPair
from settings import REFRESH_PATH
from .errors import ApiError, TransportError

logger = logging.getLogger(__name__)


async def refresh_tokens(http: httpx.AsyncClient, refresh_token: str) -> CredentialPair:
    """Exchange a refresh token for a new credential pair

    The call goes straight to the transport: no bearer header and no
    401 handling, so a rejected refresh can never trigger another refresh.

    Args:
        http: Client already bound to the versioned API base URL
        refresh_token: Current refresh token

    Returns:
        The newly issued pair

    Raises:
        ApiError: the backend rejected the refresh or answered malformed data
        TransportError: the refresh call never got a response
    """
    logger.info("Attempting to refresh access token...")
    try:
        response = await http.post(REFRESH_PATH, json={"refreshToken": refresh_token})
    except httpx.TimeoutException as e:
        logger.error(f"Token refresh timed out: {e}")
        raise TransportError("Token refresh timed out") from e
    except httpx.RequestError as e:
        logger.error(f"Token refresh request failed: {e}")
        raise TransportError(f"Token refresh failed: {e}") from e

    if not response.is_success:
        logger.error(f"Token refresh failed with status {response.status_code}: {response.text[:500]}")
        raise ApiError.from_response(response)

    try:
        tokens = response.json()["data"]["tokens"]
        pair = CredentialPair(
            access_token=tokens["accessToken"],
            refresh_token=tokens["refreshToken"],
        )
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Failed to parse token refresh response: {e}")
        raise ApiError(
            response.status_code,
            {"success": False, "error": "Malformed token refresh response"},
        ) from e

    if not pair.is_present:
        raise ApiError(response.status_code, {"success": False, "error": "Token refresh returned empty tokens"})

    logger.info("Successfully refreshed access token")
    return pair
