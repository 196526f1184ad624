"""Exception hierarchy for the Star Realms client.

Errors are layered so callers can tell a network failure apart from a
backend refusal and from a response that does not match the expected shape.
"""


class StarRealmsError(Exception):
    """Base exception for Star Realms client errors."""

    pass


class StarRealmsConnectionError(StarRealmsError):
    """Raised when the request fails at the transport level.

    DNS failures, refused connections, TLS errors and malformed framing all
    land here. The underlying httpx error is chained as ``__cause__``.
    """

    pass


class InvalidAPIResponseError(StarRealmsError):
    """Raised when the backend answers with a non-200 status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ResponseValidationError(StarRealmsError):
    """Raised when a 200 response body does not match the expected shape."""

    pass


class ClientDataDecodeError(ResponseValidationError):
    """Raised when a game's string-encoded ``clientdata`` cannot be decoded."""

    def __init__(self, message: str, field: str = "clientdata"):
        super().__init__(message)
        self.field = field


class UnknownCoreVersionError(StarRealmsError):
    """Raised when no core version in the probe range was accepted."""

    def __init__(self, min_version: int, max_version: int):
        super().__init__(
            f"Unknown core version: no version in {min_version}..{max_version} "
            "was accepted by the server"
        )
        self.min_version = min_version
        self.max_version = max_version


class InvalidPlayerNameError(StarRealmsError):
    """Raised when a player name matches neither player of a game."""

    def __init__(self, player_name: str):
        super().__init__(f"Unknown player name: {player_name}")
        self.player_name = player_name


class SessionStateError(StarRealmsError):
    """Raised when a session is used in the wrong state.

    Fetching before bootstrap has completed, or replacing the token of a
    session that already holds one.
    """

    pass


class UnknownStarRealmsError(StarRealmsError):
    """Raised for failures that fit no other category."""

    pass
