"""Activity feed models.

This module contains Pydantic models for the ``ListActivitySortable`` response:
the player's profile counters, pending challenges, and active and finished
games. Attribute names are snake_case; the server's flat lowercase names are
kept as aliases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from starrealms.exceptions import ClientDataDecodeError, InvalidPlayerNameError
from starrealms.models.heuristics import looks_finished

# =============================================================================
# Client Data
# =============================================================================


class ClientData(BaseModel):
    """Per-player names and auth values embedded in a game record."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    p1_name: str = Field(alias="p1name")
    p1_auth: str = Field(alias="p1auth", repr=False)
    p2_name: str = Field(alias="p2name")
    p2_auth: str = Field(alias="p2auth", repr=False)


def decode_client_data(raw: Any) -> ClientData:
    """Decode a ``clientdata`` value in two stages.

    The server sends ``clientdata`` as a JSON document encoded inside a JSON
    string. Stage one requires a string, stage two parses its contents.

    Raises:
        ClientDataDecodeError: If either stage fails.
    """
    if not isinstance(raw, str):
        raise ClientDataDecodeError(
            f"clientdata must be a JSON-encoded string, got {type(raw).__name__}"
        )
    try:
        return ClientData.model_validate_json(raw)
    except ValidationError as e:
        raise ClientDataDecodeError(f"Invalid clientdata: {e}") from e


# =============================================================================
# Games
# =============================================================================


class Game(BaseModel):
    """A single match record, active or finished."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    game_id: int = Field(alias="gameid")
    timing: str
    mm_data: str = Field(alias="mmdata")  # opaque, not decoded
    client_data_raw: str = Field(alias="clientdata")
    opponent_name: str = Field(alias="opponentname")
    action_needed: bool = Field(default=False, alias="actionneeded")
    end_reason: int = Field(default=0, alias="endreason")
    won: bool = False
    last_updated_time: str = Field(alias="lastupdatedtime")
    is_league_game: bool = Field(alias="isleaguegame")
    is_tournament_game: bool = Field(alias="istournamentgame")

    @property
    def client_data(self) -> ClientData:
        """The decoded ``clientdata`` payload.

        Raises:
            ClientDataDecodeError: If the payload is not valid ClientData JSON.
        """
        return decode_client_data(self.client_data_raw)

    def get_auth(self, player_name: str) -> str:
        """Return the auth value scoped to the named player.

        Args:
            player_name: Exact, case-sensitive player name.

        Raises:
            InvalidPlayerNameError: If the name matches neither player.
        """
        client_data = self.client_data
        if player_name == client_data.p1_name:
            return client_data.p1_auth
        if player_name == client_data.p2_name:
            return client_data.p2_auth
        raise InvalidPlayerNameError(player_name)

    def is_player_one(self) -> bool:
        """Whether the logged-in user is player one.

        The logged-in user never appears as the opponent, so if player one's
        name equals the opponent's name the user must be player two.
        """
        return self.opponent_name != self.client_data.p1_name

    def own_name(self) -> str:
        """Name the logged-in user has in this game."""
        client_data = self.client_data
        return client_data.p1_name if self.is_player_one() else client_data.p2_name

    def whose_turn(self) -> str:
        """Name of the player expected to act next."""
        if not self.action_needed:
            return self.opponent_name
        return self.own_name()

    def is_finished(self) -> bool:
        """Provisional finished-game check, see ``heuristics.looks_finished``."""
        return looks_finished(self.end_reason, self.won, self.action_needed)


# =============================================================================
# Challenges
# =============================================================================


class Challenge(BaseModel):
    """A pending match invitation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    challenge_id: int = Field(alias="challengeid")
    challenger_name: str = Field(alias="challengername")
    challenger_commander: str = Field(alias="challengercommander")
    opponent_name: str = Field(alias="opponentname")
    mm_data: str = Field(alias="mmdata")
    status: str
    status_description: str = Field(alias="statusdescription")
    last_updated_time: str = Field(alias="lastupdatedtime")
    timing: str


# =============================================================================
# Activity
# =============================================================================


class Activity(BaseModel):
    """Response from GET /NewGame/ListActivitySortable.

    ``pending_rewards`` and ``queues`` are passed through as raw JSON; their
    schema is server-defined and not modeled.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    accepted_terms: bool = Field(alias="acceptedterms")
    avatar: str
    rank_stars: int = Field(alias="rankstars")
    rank_total_stars: int = Field(alias="ranktotalstars")
    level: int
    arena_trophy_stars: int = Field(alias="arenatrophystars")
    has_free_arena: bool = Field(alias="hasfreearena")
    pending_rewards: Any = Field(alias="pendingrewards")
    queues: list[Any]
    challenges: list[Challenge]
    active_games: list[Game] = Field(alias="activegames")
    finished_games: list[Game] = Field(alias="finishedgames")
    result: str
