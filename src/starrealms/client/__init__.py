"""HTTP client module for the Star Realms backend.

This module provides the async transport and the bootstrapped session built
on top of it.

Usage:
    from starrealms.client import StarRealms

    async with await StarRealms.new("user", "pass") as sr:
        activity = await sr.get_activity()
"""

from starrealms.client.http_client import StarRealmsHTTPClient
from starrealms.client.session import StarRealms

__all__ = [
    "StarRealms",
    "StarRealmsHTTPClient",
]
