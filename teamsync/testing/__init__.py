"""teamsync testing utilities.

Provides a fake GitHub API and fixtures for testing code that uses teamsync.
"""

from teamsync.testing.fixtures import (
    branch_payload,
    member_edge,
    members_page,
    repo_payload,
    team_payload,
    user_payload,
)
from teamsync.testing.mock import MockCall, MockGitHubAPI, MockResponse, client_for

__all__ = [
    # Fake API
    "MockGitHubAPI",
    "MockCall",
    "MockResponse",
    "client_for",
    # Payload builders
    "team_payload",
    "repo_payload",
    "user_payload",
    "branch_payload",
    "member_edge",
    "members_page",
]
