"""teamsync type definitions.

This module exports all data model types used by the client.
"""

from teamsync.types.branches import Branch, BranchProtection, Commit
from teamsync.types.repos import Repo, RepoPermission, RepoTeam, RepoUser
from teamsync.types.requests import (
    BranchProtectionRequest,
    CreateBranchRequest,
    CreateRepoRequest,
    CreateTeamRequest,
    EditRepoRequest,
    EditTeamRequest,
    RepoPermissionRequest,
    TeamMembershipRequest,
)
from teamsync.types.teams import Team, TeamMember, TeamPrivacy, TeamRole

__all__ = [
    # Team types
    "Team",
    "TeamMember",
    "TeamPrivacy",
    "TeamRole",
    # Repository types
    "Repo",
    "RepoPermission",
    "RepoTeam",
    "RepoUser",
    # Branch types
    "Branch",
    "BranchProtection",
    "Commit",
    # Request payloads
    "CreateTeamRequest",
    "EditTeamRequest",
    "TeamMembershipRequest",
    "CreateRepoRequest",
    "EditRepoRequest",
    "RepoPermissionRequest",
    "CreateBranchRequest",
    "BranchProtectionRequest",
]
