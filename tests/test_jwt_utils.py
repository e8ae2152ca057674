from __future__ import annotations

import datetime

from carwash_auth.jwt_utils import decode_jwt, describe_time_until, get_token_expiry
from tests.helpers import make_jwt


def test_decode_jwt_payload() -> None:
    claims = decode_jwt(make_jwt())
    assert claims["sub"] == "user-1"
    assert decode_jwt("not-a-jwt") is None
    assert decode_jwt("a.!!!.c") is None


def test_token_expiry_is_utc() -> None:
    expires_at = get_token_expiry(make_jwt(expires_in=600))
    assert expires_at.tzinfo is datetime.timezone.utc
    assert get_token_expiry("opaque") is None


def test_describe_time_until() -> None:
    now = datetime.datetime.now(datetime.timezone.utc)
    assert describe_time_until(None) == "unknown"
    assert describe_time_until(now - datetime.timedelta(seconds=1)) == "expired"
    assert describe_time_until(now + datetime.timedelta(days=2, hours=3, seconds=30)) == "2d 3h"
    assert describe_time_until(now + datetime.timedelta(minutes=45, seconds=30)) == "45m"
