"""Authenticated client for the car wash management backend"""

from .client import ApiClient, ClientSettings
from .errors import ApiError, SessionExpiredError, TransportError
from .models import ApiEnvelope, JobSummary, LoginResult, Pagination, TokenSet, User
from .api import CarWashApi

__all__ = [
    "ApiClient",
    "ClientSettings",
    "ApiError",
    "SessionExpiredError",
    "TransportError",
    "ApiEnvelope",
    "JobSummary",
    "LoginResult",
    "Pagination",
    "TokenSet",
    "User",
    "CarWashApi",
]
