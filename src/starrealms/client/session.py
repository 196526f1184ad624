"""Authenticated Star Realms session.

A StarRealms session is bootstrapped in two steps: obtain a Token (by logging
in, or from a caller-supplied value), then discover the core version the
backend currently accepts. Only after both succeed can activity be fetched.

The backend gives no hint about which core version it expects. A mismatched
version just yields a non-200 response, so discovery walks the configured
range in order and adopts the first version that returns 200.
"""

from __future__ import annotations

import logging

from starrealms.client.http_client import StarRealmsHTTPClient
from starrealms.config import ClientConfig
from starrealms.exceptions import SessionStateError, UnknownCoreVersionError
from starrealms.models import Activity, Token

logger = logging.getLogger(__name__)


class StarRealms:
    """Client session for the Star Realms backend.

    Use one of the async constructors, which return a ready session:

    Example:
        async with await StarRealms.new("user", "pass") as sr:
            activity = await sr.get_activity()
            for game in activity.active_games:
                print(game.opponent_name, game.whose_turn())
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: StarRealmsHTTPClient | None = None,
    ):
        """Create an unbootstrapped session.

        Args:
            config: Client configuration (default: ClientConfig()).
            http_client: Transport to use. Built from ``config`` when omitted.
        """
        self.config = config or ClientConfig()
        self._http = http_client or StarRealmsHTTPClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
        )
        self._token = Token()
        self._core_version: int | None = None

    async def __aenter__(self) -> StarRealms:
        await self._http.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying transport."""
        await self._http.close()

    @property
    def token(self) -> Token:
        return self._token

    @property
    def core_version(self) -> int | None:
        """Discovered core version, or None before discovery."""
        return self._core_version

    @property
    def is_ready(self) -> bool:
        """Whether bootstrap has completed."""
        return bool(self._token.token2) and self._core_version is not None

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    async def new(
        cls,
        username: str,
        password: str,
        config: ClientConfig | None = None,
    ) -> StarRealms:
        """Log in with credentials and discover the core version.

        Raises:
            ValueError: If username or password is empty.
            InvalidAPIResponseError: If the login is rejected. No version
                probing happens in that case.
            UnknownCoreVersionError: If no version in range is accepted.
        """
        session = cls(config)
        try:
            await session.login(username, password)
            await session.discover_core_version()
        except BaseException:
            await session.close()
            raise
        return session

    @classmethod
    async def from_session_secret(
        cls,
        token2: str,
        config: ClientConfig | None = None,
    ) -> StarRealms:
        """Bootstrap from a bearer value obtained out of band.

        The resulting Token has only ``token2`` set.
        """
        return await cls.from_token(Token.from_session_secret(token2), config)

    @classmethod
    async def from_token(
        cls,
        token: Token,
        config: ClientConfig | None = None,
    ) -> StarRealms:
        """Bootstrap from a complete, previously obtained Token."""
        session = cls(config)
        try:
            session.use_token(token)
            await session.discover_core_version()
        except BaseException:
            await session.close()
            raise
        return session

    # =========================================================================
    # Bootstrap Steps
    # =========================================================================

    async def login(self, username: str, password: str) -> None:
        """Obtain a Token with credentials.

        The password is used for this request only. On failure the session
        keeps its default Token.
        """
        if not username or not password:
            raise ValueError("username and password must not be empty")
        self._ensure_no_token()

        await self._http.connect()
        token = await self._http.login(username, password)
        self._token = token
        logger.info("Logged in as %s (id %d)", token.name, token.id)

    def use_token(self, token: Token) -> None:
        """Adopt a caller-supplied Token."""
        if not token.token2:
            raise ValueError("token2 must not be empty")
        self._ensure_no_token()
        self._token = token

    async def discover_core_version(self) -> int:
        """Find the first core version the backend accepts.

        Versions are probed one at a time, in ascending order. Non-200 probes
        are expected and skipped; transport errors abort the search. Once a
        version is found it is kept for the life of the session.

        Returns:
            The adopted core version.

        Raises:
            SessionStateError: If no Token has been set.
            UnknownCoreVersionError: If every version in range is rejected.
            StarRealmsConnectionError: If a probe fails in transit.
        """
        if self._core_version is not None:
            return self._core_version
        if not self._token.token2:
            raise SessionStateError("Cannot discover core version without a token")

        await self._http.connect()
        for core_version in self.config.core_versions:
            if await self._http.probe_activity(self._token.token2, core_version):
                self._core_version = core_version
                logger.info("Using core version %d", core_version)
                return core_version
            logger.debug("Core version %d rejected", core_version)

        raise UnknownCoreVersionError(
            self.config.min_core_version, self.config.max_core_version
        )

    def _ensure_no_token(self) -> None:
        if self._token.token2:
            raise SessionStateError(
                "Session already holds a token; create a new session instead"
            )

    # =========================================================================
    # Activity
    # =========================================================================

    async def get_activity(self) -> Activity:
        """Get the latest user activity, including current player data.

        Raises:
            SessionStateError: If bootstrap has not completed.
            InvalidAPIResponseError: If the server returns a non-200 status.
            ResponseValidationError: If the body is not an Activity.
            StarRealmsConnectionError: If the request fails in transit.
        """
        if not self.is_ready or self._core_version is None:
            raise SessionStateError("Session is not bootstrapped")
        return await self._http.list_activity(self._token.token2, self._core_version)
