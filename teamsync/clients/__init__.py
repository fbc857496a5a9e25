"""teamsync resource clients."""

from teamsync.clients.branches import BranchesClient
from teamsync.clients.orgs import OrgsClient
from teamsync.clients.repos import ReposClient
from teamsync.clients.teams import TeamsClient

__all__ = [
    "OrgsClient",
    "TeamsClient",
    "ReposClient",
    "BranchesClient",
]
