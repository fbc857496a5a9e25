"""Branches and branch protection resource client."""

import json
from typing import Any

import httpx

from teamsync.clients._decode import decode_list, require
from teamsync.logging import get_logger
from teamsync.transport import HTTPTransport
from teamsync.types.branches import Branch, BranchProtection, Commit
from teamsync.types.repos import Repo
from teamsync.types.requests import BranchProtectionRequest, CreateBranchRequest

logger = get_logger("branches")


def _parse_branch(data: dict[str, Any]) -> Branch:
    return Branch(
        name=require(data, "name"),
        commit=Commit(sha=require(require(data, "commit"), "sha")),
    )


class BranchesClient:
    """Client for branch and branch protection operations."""

    def __init__(self, transport: HTTPTransport) -> None:
        """
        Initialize the branches client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def branch(self, repo: Repo, name: str) -> str | None:
        """
        Get the head commit of a branch.

        Returns:
            The head commit sha, or None if the branch does not exist
        """
        data = self.transport.send_option(
            "GET", f"repos/{repo.org}/{repo.name}/branches/{name}"
        )
        return None if data is None else _parse_branch(data).commit.sha

    def create_branch(self, repo: Repo, name: str, commit: str) -> None:
        """Create a branch pointing at ``commit``."""
        logger.debug(
            f"Creating branch in {repo.org}/{repo.name}: {name} with commit {commit}"
        )
        if not self.transport.dry_run:
            self.transport.send(
                "POST",
                f"repos/{repo.org}/{repo.name}/git/refs",
                CreateBranchRequest(name=name, sha=commit),
            )

    def protected_branches(self, repo: Repo) -> set[str]:
        """Get the names of a repository's protected branches."""
        names: set[str] = set()

        def accumulate(response: httpx.Response) -> None:
            names.update(_parse_branch(branch).name for branch in decode_list(response))

        self.transport.paginate(
            "GET",
            f"repos/{repo.org}/{repo.name}/branches?protected=true",
            accumulate,
        )
        return names

    def update_branch_protection(
        self,
        repo: Repo,
        branch_name: str,
        branch_protection: BranchProtection,
    ) -> bool:
        """
        Apply protection rules to a branch.

        A missing branch is reported rather than raised so callers can create
        it and try again.

        Returns:
            True if the protection was applied (always True in dry-run mode),
            False if the branch does not exist

        Raises:
            APIError: On any other status, e.g. 422 for an invalid check list
        """
        request = BranchProtectionRequest(protection=branch_protection)
        logger.debug(
            f"Updating branch protection on repo {repo.org}/{repo.name} for {branch_name}: "
            f"{json.dumps(request.to_dict(), indent=2)}"
        )
        if self.transport.dry_run:
            return True

        response = self.transport.send_raw(
            "PUT",
            f"repos/{repo.org}/{repo.name}/branches/{branch_name}/protection",
            request,
        )
        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False
        raise self.transport.error_for_response(response)

    def delete_branch_protection(self, repo: Repo, branch: str) -> None:
        """Remove all protection rules from a branch."""
        logger.debug(
            f"Removing protection in {repo.org}/{repo.name} from {branch} branch"
        )
        if not self.transport.dry_run:
            self.transport.send(
                "DELETE", f"repos/{repo.org}/{repo.name}/branches/{branch}/protection"
            )
