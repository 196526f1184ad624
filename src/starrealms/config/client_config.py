"""Configuration for the Star Realms client.

This module defines the ClientConfig dataclass holding the backend location
and the core version probe range, plus the Credentials used by the CLI and
live tests.
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_BASE_URL = "https://srprodv2.whitewizardgames.com"
DEFAULT_MIN_CORE_VERSION = 44
DEFAULT_MAX_CORE_VERSION = 99

ENV_BASE_URL = "STARREALMS_BASE_URL"
ENV_MIN_CORE_VERSION = "STARREALMS_MIN_CORE_VERSION"
ENV_MAX_CORE_VERSION = "STARREALMS_MAX_CORE_VERSION"
ENV_TIMEOUT = "STARREALMS_TIMEOUT"
ENV_USERNAME = "SR_USERNAME"
ENV_PASSWORD = "SR_PASSWORD"


@dataclass
class ClientConfig:
    """Settings for a StarRealms session.

    Attributes:
        base_url: Backend host, without a trailing slash
        min_core_version: First core version probed during discovery
        max_core_version: Last core version probed (inclusive)
        timeout: Per-request timeout in seconds (None = wait indefinitely)

    Example:
        config = ClientConfig(min_core_version=45)
        sr = await StarRealms.new("user", "pass", config=config)
    """

    base_url: str = DEFAULT_BASE_URL
    min_core_version: int = DEFAULT_MIN_CORE_VERSION
    max_core_version: int = DEFAULT_MAX_CORE_VERSION
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.base_url = self.base_url.rstrip("/")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.min_core_version < 1:
            raise ValueError("min_core_version must be at least 1")
        if self.max_core_version < self.min_core_version:
            raise ValueError("max_core_version must be >= min_core_version")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive when set")

    @property
    def core_versions(self) -> range:
        """Candidate core versions in probe order."""
        return range(self.min_core_version, self.max_core_version + 1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Create a config from a dictionary.

        Raises:
            TypeError: If the dictionary contains unknown keys.
            ValueError: If a value is out of range.
        """
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfig":
        """Load configuration from a YAML file.

        An empty file yields the default configuration.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a YAML mapping")
        return cls.from_dict(data)

    def to_yaml(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from STARREALMS_* environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        timeout = os.environ.get(ENV_TIMEOUT)
        return cls(
            base_url=os.environ.get(ENV_BASE_URL, DEFAULT_BASE_URL),
            min_core_version=int(
                os.environ.get(ENV_MIN_CORE_VERSION, DEFAULT_MIN_CORE_VERSION)
            ),
            max_core_version=int(
                os.environ.get(ENV_MAX_CORE_VERSION, DEFAULT_MAX_CORE_VERSION)
            ),
            timeout=float(timeout) if timeout else None,
        )


@dataclass(frozen=True)
class Credentials:
    """Username and password for a credential login."""

    username: str
    password: str = field(repr=False)

    @classmethod
    def from_env(cls) -> "Credentials | None":
        """Read SR_USERNAME and SR_PASSWORD, or None if either is unset."""
        username = os.environ.get(ENV_USERNAME)
        password = os.environ.get(ENV_PASSWORD)
        if not username or not password:
            return None
        return cls(username=username, password=password)
