"""Configuration for the Star Realms client."""

from starrealms.config.client_config import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_CORE_VERSION,
    DEFAULT_MIN_CORE_VERSION,
    ClientConfig,
    Credentials,
)

__all__ = [
    "ClientConfig",
    "Credentials",
    "DEFAULT_BASE_URL",
    "DEFAULT_MIN_CORE_VERSION",
    "DEFAULT_MAX_CORE_VERSION",
]
