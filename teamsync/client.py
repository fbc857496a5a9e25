"""
teamsync main client.

Provides the single entry point through which the organization-management
tool reads and mutates GitHub organizations, teams, repositories and branches.
"""

from typing import Any

import httpx

from teamsync.clients import BranchesClient, OrgsClient, ReposClient, TeamsClient
from teamsync.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from teamsync.graphql import GraphQLEngine
from teamsync.transport import HTTPTransport


class GitHubClient:
    """
    Main client for the GitHub REST and GraphQL APIs.

    Aggregates all resource clients over one shared transport.

    Example:
        ```python
        from teamsync import GitHubClient, TeamPrivacy

        with GitHubClient(token="ghp_...", dry_run=True) as client:
            team = client.teams.team("rust-lang", "infra")
            if team is None:
                team = client.teams.create_team(
                    "rust-lang", "infra", "Infrastructure team", TeamPrivacy.CLOSED
                )
            members = client.teams.team_memberships(team)
        ```

    Dry-run contract: with ``dry_run=True`` every mutating operation returns
    without contacting GitHub. Sending a mutating REST request through the
    transport directly raises ``DryRunViolation``, which is fatal by design.
    """

    def __init__(
        self,
        token: str | None = None,
        dry_run: bool = False,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: GitHub API token, already valid
            dry_run: Skip every mutating call (default: False)
            base_url: API origin (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            http_client: httpx client to send requests with (optional, owned by the caller)
            config: Complete configuration; when given, the other settings are ignored

        Raises:
            ConfigurationError: If no token is given
        """
        if config is None:
            config = ClientConfig(
                token=token or "",
                dry_run=dry_run,
                base_url=base_url,
                timeout=timeout,
            )
        self.config = config

        # Create transport layer
        self._transport = HTTPTransport(config, client=http_client)
        self.graphql = GraphQLEngine(self._transport)

        # Initialize resource clients
        self.orgs = OrgsClient(self._transport, self.graphql)
        self.teams = TeamsClient(self._transport, self.graphql)
        self.repos = ReposClient(self._transport)
        self.branches = BranchesClient(self._transport)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        http_client: httpx.Client | None = None,
    ) -> "GitHubClient":
        """Create a client from an existing configuration object."""
        return cls(config=config, http_client=http_client)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: API token (required)
            TEAMSYNC_DRY_RUN: "1"/"true"/"yes"/"on" to enable dry-run (optional)
            GITHUB_API_URL: API origin (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If required environment variables are missing
                or invalid
        """
        return cls.from_config(ClientConfig.from_env(timeout=timeout), http_client)

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
