"""Shared fixtures and utilities for starrealms tests.

This module provides:
- The `requires_credentials` decorator to skip live tests without an account
- Sample server payloads for tokens, games, challenges and activity
- A factory for mocked httpx responses
- Custom markers for test categorization
"""

import json
import os
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest
from httpx import Response


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests that talk to the live backend"
    )


# Skip decorator for live tests that need a real account
requires_credentials = pytest.mark.skipif(
    not (os.environ.get("SR_USERNAME") and os.environ.get("SR_PASSWORD")),
    reason="Live test requires SR_USERNAME and SR_PASSWORD",
)


CLIENT_DATA = {
    "p1name": "Alice",
    "p1auth": "auth-alice",
    "p2name": "Bob",
    "p2auth": "auth-bob",
}


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for mocked httpx responses.

    Returns:
        A callable taking a status code and an optional JSON body.
    """

    def _make(status_code: int = 200, data: Any = None) -> MagicMock:
        response = MagicMock(spec=Response)
        response.status_code = status_code
        response.text = json.dumps(data) if data is not None else ""
        response.json.return_value = data
        return response

    return _make


@pytest.fixture
def token_json() -> dict[str, Any]:
    """Sample login response."""
    return {
        "name": "Alice",
        "id": 123456,
        "token1": "long-lived-secret",
        "token2": "bearer-value",
        "purchases": ["crisis", "gambit", "colony-wars"],
    }


@pytest.fixture
def game_json() -> dict[str, Any]:
    """Sample active game where the logged-in user (Alice) is player one."""
    return {
        "gameid": 987654,
        "timing": "standard",
        "mmdata": "opaque-mm",
        "clientdata": json.dumps(CLIENT_DATA),
        "opponentname": "Bob",
        "actionneeded": True,
        "endreason": 0,
        "won": False,
        "lastupdatedtime": "2024-03-01T12:34:56.789",
        "isleaguegame": False,
        "istournamentgame": True,
    }


@pytest.fixture
def challenge_json() -> dict[str, Any]:
    """Sample pending challenge."""
    return {
        "challengeid": 4242,
        "challengername": "Carol",
        "challengercommander": "Blob",
        "opponentname": "Alice",
        "mmdata": "opaque-mm",
        "status": "1",
        "statusdescription": "Waiting for response",
        "lastupdatedtime": "2024-03-02T08:00:00",
        "timing": "blitz",
    }


@pytest.fixture
def activity_json(
    game_json: dict[str, Any], challenge_json: dict[str, Any]
) -> dict[str, Any]:
    """Sample ListActivitySortable response."""
    finished = dict(game_json, gameid=111, actionneeded=False, won=True, endreason=1)
    return {
        "acceptedterms": True,
        "avatar": "avatar_07",
        "rankstars": 3,
        "ranktotalstars": 120,
        "level": 17,
        "arenatrophystars": 5,
        "hasfreearena": False,
        "pendingrewards": {"gold": 10},
        "queues": [{"name": "ranked"}],
        "challenges": [challenge_json],
        "activegames": [game_json],
        "finishedgames": [finished],
        "result": "Success",
    }


@pytest.fixture
def empty_activity_json() -> dict[str, Any]:
    """Activity response with no games or challenges."""
    return {
        "acceptedterms": True,
        "avatar": "",
        "rankstars": 0,
        "ranktotalstars": 0,
        "level": 1,
        "arenatrophystars": 0,
        "hasfreearena": True,
        "pendingrewards": None,
        "queues": [],
        "challenges": [],
        "activegames": [],
        "finishedgames": [],
        "result": "Success",
    }
