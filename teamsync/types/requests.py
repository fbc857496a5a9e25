"""Request payloads sent by the mutating operations.

One dataclass per operation keeps the wire contract in a single auditable
place; ``to_dict()`` returns exactly the JSON body GitHub receives.
"""

from dataclasses import dataclass
from typing import Any

from teamsync.types.branches import BranchProtection
from teamsync.types.repos import RepoPermission
from teamsync.types.teams import TeamPrivacy, TeamRole


@dataclass(frozen=True)
class CreateTeamRequest:
    name: str
    description: str
    privacy: TeamPrivacy

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "privacy": self.privacy.value,
        }


@dataclass(frozen=True)
class EditTeamRequest:
    """Partial team update; unset fields are left out of the body."""

    name: str | None = None
    description: str | None = None
    privacy: TeamPrivacy | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.name is not None:
            body["name"] = self.name
        if self.description is not None:
            body["description"] = self.description
        if self.privacy is not None:
            body["privacy"] = self.privacy.value
        return body


@dataclass(frozen=True)
class TeamMembershipRequest:
    role: TeamRole

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role.value}


@dataclass(frozen=True)
class CreateRepoRequest:
    name: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class EditRepoRequest:
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description}


@dataclass(frozen=True)
class RepoPermissionRequest:
    permission: RepoPermission

    def to_dict(self) -> dict[str, Any]:
        return {"permission": self.permission.value}


@dataclass(frozen=True)
class CreateBranchRequest:
    name: str
    sha: str

    def to_dict(self) -> dict[str, Any]:
        return {"ref": f"refs/heads/{self.name}", "sha": self.sha}


@dataclass(frozen=True)
class BranchProtectionRequest:
    """
    Full branch protection body.

    Admins are always subject to the rules, status checks are never strict and
    push restrictions are granted to users only.
    """

    protection: BranchProtection

    def to_dict(self) -> dict[str, Any]:
        return {
            "required_status_checks": {
                "strict": False,
                "checks": [{"context": check} for check in self.protection.required_checks],
            },
            "enforce_admins": True,
            "required_pull_request_reviews": {
                # Cannot be omitted even though no dismissal restrictions are wanted
                "dismissal_restrictions": {},
                "dismiss_stale_reviews": self.protection.dismiss_stale_reviews,
                "required_approving_review_count": self.protection.required_approving_review_count,
            },
            "restrictions": {
                "users": list(self.protection.allowed_users),
                "teams": [],
            },
        }
