"""Repositories resource client."""

from typing import Any

import httpx

from teamsync.clients._decode import decode_list, parse_enum, require
from teamsync.logging import get_logger
from teamsync.transport import HTTPTransport
from teamsync.types.repos import Repo, RepoPermission, RepoTeam, RepoUser
from teamsync.types.requests import (
    CreateRepoRequest,
    EditRepoRequest,
    RepoPermissionRequest,
)

logger = get_logger("repos")


def _parse_repo(data: dict[str, Any]) -> Repo:
    """Parse a repository; the org is the login of the nested owner object."""
    return Repo(
        name=require(data, "name"),
        org=require(require(data, "owner"), "login"),
        description=data.get("description"),
        default_branch=require(data, "default_branch"),
    )


def _parse_repo_team(data: dict[str, Any]) -> RepoTeam:
    return RepoTeam(
        name=require(data, "name"),
        permission=parse_enum(RepoPermission, require(data, "permission")),
    )


def _parse_repo_user(data: dict[str, Any]) -> RepoUser:
    name = data["login"] if "login" in data else require(data, "name")
    return RepoUser(
        name=name,
        permission=parse_enum(RepoPermission, require(data, "permission")),
    )


class ReposClient:
    """Client for repository and repository access operations."""

    def __init__(self, transport: HTTPTransport) -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def repo(self, org: str, name: str) -> Repo | None:
        """
        Get a repository by organization and name.

        Returns:
            The repository, or None if it does not exist
        """
        data = self.transport.send_option("GET", f"repos/{org}/{name}")
        return None if data is None else _parse_repo(data)

    def create_repo(self, org: str, name: str, description: str) -> Repo:
        """
        Create a repository in an organization.

        In dry-run mode nothing is sent and a local repository with a
        ``main`` default branch is returned.
        """
        request = CreateRepoRequest(name=name, description=description)
        logger.debug(f"Creating the repo {org}/{name} with {request.to_dict()}")
        if self.transport.dry_run:
            return Repo(
                name=name,
                org=org,
                description=description,
                default_branch="main",
            )

        return _parse_repo(self.transport.request_json("POST", f"orgs/{org}/repos", request))

    def edit_repo(self, repo: Repo, description: str) -> None:
        """Change a repository's description."""
        request = EditRepoRequest(description=description)
        logger.debug(f"Editing repo {repo.org}/{repo.name} with {request.to_dict()}")
        if not self.transport.dry_run:
            self.transport.send("PATCH", f"repos/{repo.org}/{repo.name}", request)

    def repo_teams(self, org: str, repo: str) -> list[RepoTeam]:
        """
        List the teams with access to a repository.

        Returns:
            Teams and their permission, across all pages
        """
        teams: list[RepoTeam] = []

        def accumulate(response: httpx.Response) -> None:
            teams.extend(_parse_repo_team(team) for team in decode_list(response))

        self.transport.paginate("GET", f"repos/{org}/{repo}/teams", accumulate)
        return teams

    def repo_collaborators(self, org: str, repo: str) -> list[RepoUser]:
        """
        List the direct collaborators of a repository.

        Users who only have access through a team are not included.
        """
        users: list[RepoUser] = []

        def accumulate(response: httpx.Response) -> None:
            users.extend(_parse_repo_user(user) for user in decode_list(response))

        self.transport.paginate(
            "GET",
            f"repos/{org}/{repo}/collaborators?affiliation=direct",
            accumulate,
        )
        return users

    def update_team_repo_permissions(
        self,
        org: str,
        repo: str,
        team: str,
        permission: RepoPermission,
    ) -> None:
        """Grant a team access to a repository, or change its permission."""
        logger.debug(
            f"Updating permission for team {team} on {org}/{repo} to {permission.name}"
        )
        if not self.transport.dry_run:
            self.transport.send(
                "PUT",
                f"orgs/{org}/teams/{team}/repos/{org}/{repo}",
                RepoPermissionRequest(permission=permission),
            )

    def update_user_repo_permissions(
        self,
        org: str,
        repo: str,
        user: str,
        permission: RepoPermission,
    ) -> None:
        """Grant a user direct access to a repository, or change their permission."""
        logger.debug(
            f"Updating permission for user {user} on {org}/{repo} to {permission.name}"
        )
        if not self.transport.dry_run:
            self.transport.send(
                "PUT",
                f"repos/{org}/{repo}/collaborators/{user}",
                RepoPermissionRequest(permission=permission),
            )

    def remove_team_from_repo(self, org: str, repo: str, team: str) -> None:
        """Revoke a team's access to a repository."""
        logger.debug(f"Removing team {team} from repo {org}/{repo}")
        if not self.transport.dry_run:
            self.transport.send("DELETE", f"orgs/{org}/teams/{team}/repos/{org}/{repo}")

    def remove_collaborator_from_repo(self, org: str, repo: str, collaborator: str) -> None:
        """Revoke a direct collaborator's access to a repository."""
        logger.debug(f"Removing collaborator {collaborator} from repo {org}/{repo}")
        if not self.transport.dry_run:
            self.transport.send("DELETE", f"repos/{org}/{repo}/collaborators/{collaborator}")
