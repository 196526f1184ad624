"""CLI module for the Star Realms client.

Usage:
    python -m starrealms.cli --help
    python -m starrealms.cli login --output token.json
    python -m starrealms.cli activity --token-file token.json
"""

from starrealms.cli.main import app

__all__ = ["app"]
