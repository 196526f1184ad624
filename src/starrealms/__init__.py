"""Unofficial async client for the Star Realms game backend.

Usage:
    from starrealms import StarRealms

    sr = await StarRealms.new("user", "pass")
    activity = await sr.get_activity()
"""

from starrealms.client import StarRealms, StarRealmsHTTPClient
from starrealms.config import ClientConfig, Credentials
from starrealms.exceptions import (
    ClientDataDecodeError,
    InvalidAPIResponseError,
    InvalidPlayerNameError,
    ResponseValidationError,
    SessionStateError,
    StarRealmsConnectionError,
    StarRealmsError,
    UnknownCoreVersionError,
    UnknownStarRealmsError,
)
from starrealms.models import Activity, Challenge, ClientData, Game, Token

__version__ = "0.1.0"

__all__ = [
    # Client
    "StarRealms",
    "StarRealmsHTTPClient",
    # Config
    "ClientConfig",
    "Credentials",
    # Models
    "Token",
    "Activity",
    "Challenge",
    "ClientData",
    "Game",
    # Errors
    "StarRealmsError",
    "StarRealmsConnectionError",
    "InvalidAPIResponseError",
    "ResponseValidationError",
    "ClientDataDecodeError",
    "UnknownCoreVersionError",
    "InvalidPlayerNameError",
    "SessionStateError",
    "UnknownStarRealmsError",
]
