"""Pydantic models for the Star Realms client.

Usage:
    from starrealms.models import Token, Activity, Game, Challenge
"""

from starrealms.models.activity import (
    Activity,
    Challenge,
    ClientData,
    Game,
    decode_client_data,
)
from starrealms.models.heuristics import looks_finished
from starrealms.models.token import Token

__all__ = [
    # Session
    "Token",
    # Activity
    "Activity",
    "Challenge",
    "ClientData",
    "Game",
    "decode_client_data",
    # Heuristics
    "looks_finished",
]
