"""Client configuration."""

import os
from dataclasses import dataclass

from teamsync.exceptions import ConfigurationError
from teamsync.version import __version__

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"teamsync/{__version__}"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable client configuration.

    Built once and shared by every resource client; nothing in the client
    mutates it after construction.
    """

    token: str
    dry_run: bool = False
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.token:
            raise ConfigurationError("A GitHub token is required")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(token='***', dry_run={self.dry_run}, "
            f"base_url={self.base_url!r}, timeout={self.timeout}, "
            f"user_agent={self.user_agent!r})"
        )

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Environment variables:
            GITHUB_TOKEN: API token (required)
            TEAMSYNC_DRY_RUN: Enable dry-run mode (optional, default: false)
            GITHUB_API_URL: API origin (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If GITHUB_TOKEN is missing or TEAMSYNC_DRY_RUN
                is not a recognised boolean
        """
        token = os.environ.get("GITHUB_TOKEN")
        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable not set")

        return cls(
            token=token,
            dry_run=parse_bool(os.environ.get("TEAMSYNC_DRY_RUN", ""), "TEAMSYNC_DRY_RUN"),
            base_url=os.environ.get("GITHUB_API_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean environment value."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid {name}: {value!r}. Must be one of: "
        f"{', '.join(sorted(_TRUE_VALUES | (_FALSE_VALUES - {''})))}"
    )
