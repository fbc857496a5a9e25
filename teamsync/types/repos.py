"""Repository-related data models."""

from dataclasses import dataclass
from enum import Enum


class RepoPermission(str, Enum):
    """Access level granted to a team or collaborator on a repository."""

    # The GitHub UI says "write", the API still uses the older "push"
    WRITE = "push"
    ADMIN = "admin"
    MAINTAIN = "maintain"
    TRIAGE = "triage"


@dataclass(frozen=True)
class Repo:
    """Repository information."""

    name: str
    org: str
    description: str | None
    default_branch: str


@dataclass(frozen=True)
class RepoTeam:
    """A team's access grant on a repository."""

    name: str
    permission: RepoPermission


@dataclass(frozen=True)
class RepoUser:
    """A direct (non-team) collaborator grant on a repository."""

    name: str
    permission: RepoPermission
