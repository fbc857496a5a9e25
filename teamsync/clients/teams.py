"""Teams resource client."""

from typing import Any

from teamsync.clients._decode import parse_enum, require
from teamsync.exceptions import ProtocolError
from teamsync.graphql import TEAM_MEMBERS_QUERY, GraphQLEngine, PageInfo, team_node_id
from teamsync.logging import get_logger
from teamsync.transport import HTTPTransport
from teamsync.types.requests import (
    CreateTeamRequest,
    EditTeamRequest,
    TeamMembershipRequest,
)
from teamsync.types.teams import Team, TeamMember, TeamPrivacy, TeamRole

logger = get_logger("teams")


def _parse_team(data: dict[str, Any]) -> Team:
    return Team(
        id=int(require(data, "id")),
        name=require(data, "name"),
        description=data.get("description") or "",
        privacy=parse_enum(TeamPrivacy, require(data, "privacy")),
    )


def _parse_role(value: Any) -> TeamRole:
    try:
        return TeamRole.from_wire(value)
    except (AttributeError, ValueError) as e:
        raise ProtocolError(f"Unknown TeamRole value: {value!r}") from e


class TeamsClient:
    """Client for team and team membership operations."""

    def __init__(self, transport: HTTPTransport, graphql: GraphQLEngine) -> None:
        """
        Initialize the teams client.

        Args:
            transport: HTTP transport for making requests
            graphql: GraphQL engine sharing the same transport
        """
        self.transport = transport
        self.graphql = graphql

    def team(self, org: str, name: str) -> Team | None:
        """
        Get a team by organization and name (slug).

        Returns:
            The team, or None if it does not exist
        """
        data = self.transport.send_option("GET", f"orgs/{org}/teams/{name}")
        return None if data is None else _parse_team(data)

    def create_team(
        self,
        org: str,
        name: str,
        description: str,
        privacy: TeamPrivacy,
    ) -> Team:
        """
        Create a team in an organization.

        In dry-run mode nothing is sent and the returned team has ``id=None``,
        which later calls use to recognise it as never persisted.

        Returns:
            The created team
        """
        request = CreateTeamRequest(name=name, description=description, privacy=privacy)
        logger.debug(f"Creating team '{name}' in '{org}'")
        if self.transport.dry_run:
            return Team(id=None, name=name, description=description, privacy=privacy)

        return _parse_team(self.transport.request_json("POST", f"orgs/{org}/teams", request))

    def edit_team(
        self,
        org: str,
        name: str,
        new_name: str | None = None,
        new_description: str | None = None,
        new_privacy: TeamPrivacy | None = None,
    ) -> None:
        """
        Edit a team. Only the fields that are given are changed.

        Args:
            org: Organization login
            name: Current team name (slug)
            new_name: New team name (optional)
            new_description: New description (optional)
            new_privacy: New privacy level (optional)
        """
        request = EditTeamRequest(
            name=new_name,
            description=new_description,
            privacy=new_privacy,
        )
        logger.debug(f"Editing team '{name}' in '{org}' with request: {request.to_dict()}")
        if not self.transport.dry_run:
            self.transport.send("PATCH", f"orgs/{org}/teams/{name}", request)

    def delete_team(self, org: str, name: str) -> None:
        """Delete a team by organization and name."""
        logger.debug(f"Deleting team '{name}' in '{org}'")
        if not self.transport.dry_run:
            self.transport.send("DELETE", f"orgs/{org}/teams/{name}")

    def team_memberships(self, team: Team) -> dict[int, TeamMember]:
        """
        List the members of a team with their roles.

        Walks the team's ``members`` connection page by page. Teams created
        by a dry run (``id is None``) have no members and no request is made.

        Args:
            team: The team to list

        Returns:
            Mapping of user database id to membership

        Raises:
            ProtocolError: If the team id does not resolve to a team node
        """
        memberships: dict[int, TeamMember] = {}
        if team.id is None:
            return memberships

        page_info = PageInfo.start()
        while page_info.has_next_page:
            data = self.graphql.execute(
                TEAM_MEMBERS_QUERY,
                {"team": team_node_id(team.id), "cursor": page_info.end_cursor},
                operation="team_memberships",
            )
            node = data.get("node")
            if node is None:
                raise ProtocolError(f"Team {team.id} did not resolve to a GraphQL node")

            members = require(node, "members")
            page_info = PageInfo.from_dict(require(members, "pageInfo"))
            for edge in require(members, "edges"):
                user = require(edge, "node")
                memberships[int(require(user, "databaseId"))] = TeamMember(
                    username=require(user, "login"),
                    role=_parse_role(require(edge, "role")),
                )

        return memberships

    def set_team_membership(
        self,
        org: str,
        team: str,
        user: str,
        role: TeamRole,
    ) -> None:
        """Add a user to a team, or change their role in it."""
        logger.debug(f"Setting membership of '{user}' in team '{team}' to {role} in '{org}'")
        if not self.transport.dry_run:
            self.transport.send(
                "PUT",
                f"orgs/{org}/teams/{team}/memberships/{user}",
                TeamMembershipRequest(role=role),
            )

    def remove_team_membership(self, org: str, team: str, user: str) -> None:
        """Remove a user from a team."""
        logger.debug(f"Removing membership of '{user}' from team '{team}' in '{org}'")
        if not self.transport.dry_run:
            self.transport.send("DELETE", f"orgs/{org}/teams/{team}/memberships/{user}")
