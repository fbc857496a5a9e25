"""
Pytest fixtures for teamsync testing.

Provides the fake API, clients wired to it, sample values and builders for
the JSON payloads GitHub returns.
"""

from collections.abc import Generator
from typing import Any

import pytest

from teamsync.client import GitHubClient
from teamsync.testing.mock import MockGitHubAPI, client_for
from teamsync.types.branches import BranchProtection
from teamsync.types.repos import Repo
from teamsync.types.teams import Team, TeamPrivacy


# ============================================================================
# Payload builders
# ============================================================================


def team_payload(
    team_id: int,
    name: str,
    description: str | None = "",
    privacy: str = "closed",
) -> dict[str, Any]:
    """Build a REST team object."""
    return {
        "id": team_id,
        "node_id": f"T_{team_id}",
        "name": name,
        "slug": name,
        "description": description,
        "privacy": privacy,
        "permission": "pull",
    }


def repo_payload(
    org: str,
    name: str,
    description: str | None = None,
    default_branch: str = "main",
) -> dict[str, Any]:
    """Build a REST repository object."""
    return {
        "id": 1296269,
        "name": name,
        "full_name": f"{org}/{name}",
        "owner": {"login": org, "id": 1, "type": "Organization"},
        "private": False,
        "description": description,
        "default_branch": default_branch,
    }


def user_payload(user_id: int, login: str, **extra: Any) -> dict[str, Any]:
    """Build a REST user object."""
    return {"id": user_id, "login": login, "type": "User", **extra}


def branch_payload(name: str, sha: str, protected: bool = False) -> dict[str, Any]:
    """Build a REST branch object."""
    return {
        "name": name,
        "commit": {"sha": sha, "url": f"https://api.github.com/commits/{sha}"},
        "protected": protected,
    }


def member_edge(user_id: int, login: str, role: str = "MEMBER") -> dict[str, Any]:
    """Build one edge of a team ``members`` connection."""
    return {"role": role, "node": {"databaseId": user_id, "login": login}}


def members_page(
    edges: list[dict[str, Any]],
    end_cursor: str | None = None,
    has_next_page: bool = False,
) -> dict[str, Any]:
    """Build the ``data`` of one team membership query page."""
    return {
        "node": {
            "members": {
                "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next_page},
                "edges": edges,
            }
        }
    }


# ============================================================================
# Fake API and client fixtures
# ============================================================================


@pytest.fixture
def mock_api() -> Generator[MockGitHubAPI, None, None]:
    """
    Provide a MockGitHubAPI.

    Example:
        ```python
        def test_lookup(mock_api, client):
            mock_api.add("GET", "repos/acme/site", json=repo_payload("acme", "site"))
            assert client.repos.repo("acme", "site") is not None
        ```
    """
    api = MockGitHubAPI()
    yield api
    api.reset()


@pytest.fixture
def client(mock_api: MockGitHubAPI) -> Generator[GitHubClient, None, None]:
    """Provide a live-mode client served by ``mock_api``."""
    github = client_for(mock_api)
    yield github
    github.close()


@pytest.fixture
def dry_run_client(mock_api: MockGitHubAPI) -> Generator[GitHubClient, None, None]:
    """Provide a dry-run client served by ``mock_api``."""
    github = client_for(mock_api, dry_run=True)
    yield github
    github.close()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_team() -> Team:
    """Provide a persisted Team."""
    return Team(
        id=3141,
        name="infra",
        description="Infrastructure team",
        privacy=TeamPrivacy.CLOSED,
    )


@pytest.fixture
def sample_repo() -> Repo:
    """Provide a Repo."""
    return Repo(
        name="website",
        org="acme",
        description="The acme website",
        default_branch="main",
    )


@pytest.fixture
def sample_branch_protection() -> BranchProtection:
    """Provide a BranchProtection."""
    return BranchProtection(
        dismiss_stale_reviews=True,
        required_approving_review_count=1,
        required_checks=["CI", "lint"],
        allowed_users=["bors"],
    )
