"""Entry point for running the CLI as a module.

Usage:
    python -m starrealms.cli --help
"""

from starrealms.cli.main import app

if __name__ == "__main__":
    app()
