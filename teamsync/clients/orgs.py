"""Organizations resource client."""

from collections.abc import Iterable

import httpx

from teamsync.clients._decode import decode_list, require
from teamsync.exceptions import ProtocolError
from teamsync.graphql import USERNAMES_QUERY, GraphQLEngine, user_node_id
from teamsync.transport import HTTPTransport

# Upper bound of ids GitHub accepts in a single ``nodes(ids:)`` query
USERNAME_CHUNK_SIZE = 100


class OrgsClient:
    """Client for organization-level lookups."""

    def __init__(self, transport: HTTPTransport, graphql: GraphQLEngine) -> None:
        """
        Initialize the orgs client.

        Args:
            transport: HTTP transport for making requests
            graphql: GraphQL engine sharing the same transport
        """
        self.transport = transport
        self.graphql = graphql

    def usernames(self, ids: Iterable[int]) -> dict[int, str]:
        """
        Resolve user database ids to logins.

        Ids are sent in chunks of ``USERNAME_CHUNK_SIZE``. Ids that resolve to
        no node (deleted or inaccessible users) are left out of the result.

        Args:
            ids: User database ids

        Returns:
            Mapping of database id to login
        """
        ids = list(ids)
        result: dict[int, str] = {}
        for start in range(0, len(ids), USERNAME_CHUNK_SIZE):
            chunk = ids[start:start + USERNAME_CHUNK_SIZE]
            data = self.graphql.execute(
                USERNAMES_QUERY,
                {"ids": [user_node_id(user_id) for user_id in chunk]},
                operation="usernames",
            )
            nodes = data.get("nodes")
            if not isinstance(nodes, list):
                raise ProtocolError(f"Missing 'nodes' in {data!r}")
            for node in nodes:
                if node is None:
                    continue
                result[int(require(node, "databaseId"))] = require(node, "login")
        return result

    def org_owners(self, org: str) -> set[int]:
        """
        Get the ids of an organization's owners.

        Args:
            org: Organization login

        Returns:
            Set of user database ids
        """
        owners: set[int] = set()

        def accumulate(response: httpx.Response) -> None:
            owners.update(int(require(user, "id")) for user in decode_list(response))

        self.transport.paginate("GET", f"orgs/{org}/members?role=admin", accumulate)
        return owners

    def org_teams(self, org: str) -> set[str]:
        """
        Get the names of all teams in an organization.

        Args:
            org: Organization login

        Returns:
            Set of team names
        """
        teams: set[str] = set()

        def accumulate(response: httpx.Response) -> None:
            teams.update(require(team, "name") for team in decode_list(response))

        self.transport.paginate("GET", f"orgs/{org}/teams", accumulate)
        return teams
