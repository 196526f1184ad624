"""Session token model.

The login endpoint returns this shape verbatim. ``token2`` is the bearer value
sent in the ``Auth`` header of every authenticated request.
"""

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """Identity of an authenticated session.

    A default-constructed Token (empty strings, zero id, no purchases) stands
    for "no session yet".
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    name: str = ""
    id: int = 0
    # Secrets stay out of repr() so they never reach logs or tracebacks
    token1: str = Field(default="", repr=False)
    token2: str = Field(default="", repr=False)
    purchases: list[str] = Field(default_factory=list)

    @classmethod
    def from_session_secret(cls, token2: str) -> "Token":
        """Build a Token carrying only the bearer value."""
        return cls(token2=token2)

    @classmethod
    def from_json(cls, data: str | bytes) -> "Token":
        """Parse a Token from its wire JSON shape."""
        return cls.model_validate_json(data)

    def to_json(self) -> str:
        """Serialize to the wire JSON shape."""
        return self.model_dump_json(by_alias=True)
