"""Credential handling for the car wash API client"""

from .models import CredentialPair
from .credentials import CredentialStore, DurableTokenStore
from .jwt_utils import decode_jwt, get_token_expiry, describe_time_until
from .validators import password_strength, strength_label, validate_new_password

__all__ = [
    "CredentialPair",
    "CredentialStore",
    "DurableTokenStore",
    "decode_jwt",
    "get_token_expiry",
    "describe_time_until",
    "password_strength",
    "strength_label",
    "validate_new_password",
]
