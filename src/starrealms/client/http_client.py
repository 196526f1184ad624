"""Async HTTP transport for the Star Realms backend.

This module wraps a single httpx.AsyncClient and classifies every failure into
the client's error taxonomy: transport errors, non-200 API rejections and
response bodies that fail Pydantic validation. Requests are never retried.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from httpx import AsyncClient, HTTPError, Response
from pydantic import BaseModel, ValidationError

from starrealms.config import DEFAULT_BASE_URL
from starrealms.exceptions import (
    InvalidAPIResponseError,
    ResponseValidationError,
    StarRealmsConnectionError,
    UnknownStarRealmsError,
)
from starrealms.models import Activity, Token

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

LOGIN_ENDPOINT = "/Account/Login"
ACTIVITY_ENDPOINT = "/NewGame/ListActivitySortable"


class StarRealmsHTTPClient:
    """Async HTTP client for the Star Realms REST endpoints.

    Example:
        async with StarRealmsHTTPClient() as client:
            token = await client.login("user", "pass")
            accepted = await client.probe_activity(token.token2, 45)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ):
        """Initialize the HTTP client.

        Args:
            base_url: Backend host (default: production server)
            timeout: Request timeout in seconds (default: None, no timeout)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: AsyncClient | None = None

    async def __aenter__(self) -> StarRealmsHTTPClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create the underlying httpx.AsyncClient if needed."""
        if self._client is None:
            self._client = AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
            )
            logger.debug("HTTP client connected to %s", self.base_url)

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")

    # =========================================================================
    # Public API Methods
    # =========================================================================

    async def login(self, username: str, password: str) -> Token:
        """Exchange credentials for a session token.

        Args:
            username: Account username.
            password: Account password. Sent once, never stored.

        Returns:
            The Token returned by the server.

        Raises:
            InvalidAPIResponseError: If the server rejects the credentials.
            ResponseValidationError: If the body is not a Token.
            StarRealmsConnectionError: If the request fails in transit.
        """
        return await self._request(
            "POST",
            LOGIN_ENDPOINT,
            Token,
            data={"username": username, "password": password},
        )

    async def list_activity(self, auth: str, core_version: int) -> Activity:
        """Fetch the current activity snapshot.

        Args:
            auth: Bearer value (``Token.token2``).
            core_version: Protocol version to send.

        Raises:
            InvalidAPIResponseError: If the server returns a non-200 status.
            ResponseValidationError: If the body is not an Activity.
            StarRealmsConnectionError: If the request fails in transit.
        """
        return await self._request(
            "GET",
            ACTIVITY_ENDPOINT,
            Activity,
            headers=self._auth_headers(auth, core_version),
        )

    async def probe_activity(self, auth: str, core_version: int) -> bool:
        """Check whether the server accepts a core version.

        Returns:
            True on a 200 response, False on any other status.

        Raises:
            StarRealmsConnectionError: If the request fails in transit.
        """
        response = await self._send(
            "GET",
            ACTIVITY_ENDPOINT,
            headers=self._auth_headers(auth, core_version),
        )
        return response.status_code == 200

    # =========================================================================
    # Internal HTTP Methods
    # =========================================================================

    @staticmethod
    def _auth_headers(auth: str, core_version: int) -> dict[str, str]:
        return {"Auth": auth, "coreversion": str(core_version)}

    async def _send(self, method: str, endpoint: str, **kwargs: Any) -> Response:
        """Send one request and return the raw response.

        Raises:
            StarRealmsConnectionError: If the client is not connected or the
                request fails at the transport level.
            UnknownStarRealmsError: For any other unexpected failure.
        """
        if self._client is None:
            raise StarRealmsConnectionError("Client not connected. Call connect() first.")

        logger.debug("Request %s %s", method, endpoint)
        try:
            return await self._client.request(method, endpoint, **kwargs)
        except HTTPError as e:
            logger.warning("HTTP error on %s %s: %s", method, endpoint, e)
            raise StarRealmsConnectionError(f"HTTP error: {e}") from e
        except Exception as e:
            raise UnknownStarRealmsError(f"Unexpected error: {e}") from e

    async def _request(
        self,
        method: str,
        endpoint: str,
        response_model: type[T],
        **kwargs: Any,
    ) -> T:
        """Send one request and parse a 200 body into ``response_model``.

        Raises:
            InvalidAPIResponseError: If the status is not 200.
            ResponseValidationError: If the body does not match the model.
            StarRealmsConnectionError: If the request fails in transit.
        """
        response = await self._send(method, endpoint, **kwargs)

        if response.status_code != 200:
            logger.warning("API error %d on %s %s", response.status_code, method, endpoint)
            raise InvalidAPIResponseError(
                f"Invalid API response {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseValidationError(f"Response is not valid JSON: {e}") from e

        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise ResponseValidationError(f"Response validation error: {e}") from e
