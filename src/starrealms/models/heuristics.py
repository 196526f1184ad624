"""Provisional rules inferred from observed server data.

Nothing here is backed by backend documentation. The rules are kept apart
from the models so they can be corrected without touching parsing or the
transport.
"""


def looks_finished(end_reason: int, won: bool, action_needed: bool) -> bool:
    """Guess whether a game record describes a finished game.

    Observed: finished games report ``endreason == 0`` with neither ``won``
    nor ``actionneeded`` set. Unverified against live data for all end
    reasons.
    """
    return end_reason == 0 and not won and not action_needed
