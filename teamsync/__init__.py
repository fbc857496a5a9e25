"""teamsync - typed GitHub REST and GraphQL client for organization management."""

from teamsync.client import GitHubClient
from teamsync.config import ClientConfig
from teamsync.exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    DryRunViolation,
    GitHubError,
    GraphQLError,
    NotFoundError,
    ProtocolError,
    RateLimitedError,
    ServerError,
    TransportError,
    ValidationError,
)
from teamsync.graphql import GraphQLEngine, PageInfo, team_node_id, user_node_id
from teamsync.logging import configure_logging, get_logger
from teamsync.transport import HTTPTransport
from teamsync.types import (
    Branch,
    BranchProtection,
    Commit,
    Repo,
    RepoPermission,
    RepoTeam,
    RepoUser,
    Team,
    TeamMember,
    TeamPrivacy,
    TeamRole,
)
from teamsync.version import __version__

__all__ = [
    "__version__",
    # Main Client
    "GitHubClient",
    "ClientConfig",
    # Types
    "Team",
    "TeamMember",
    "TeamPrivacy",
    "TeamRole",
    "Repo",
    "RepoPermission",
    "RepoTeam",
    "RepoUser",
    "Branch",
    "BranchProtection",
    "Commit",
    # Exceptions
    "GitHubError",
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "GraphQLError",
    "ProtocolError",
    "TransportError",
    "ConfigurationError",
    "DryRunViolation",
    # Transport and GraphQL
    "HTTPTransport",
    "GraphQLEngine",
    "PageInfo",
    "user_node_id",
    "team_node_id",
    # Logging
    "configure_logging",
    "get_logger",
]
