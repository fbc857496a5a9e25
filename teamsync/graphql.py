"""
GraphQL engine for teamsync.

Executes queries against the GraphQL endpoint, unwraps the ``{data, errors}``
envelope and provides the global node id encoding and cursor page info used
by connection traversals.
"""

import base64
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from teamsync.exceptions import GraphQLError, ProtocolError
from teamsync.logging import log_graphql_query

if TYPE_CHECKING:
    from teamsync.transport import HTTPTransport


USERNAMES_QUERY = """
query($ids: [ID!]!) {
    nodes(ids: $ids) {
        ... on User {
            databaseId
            login
        }
    }
}
"""

TEAM_MEMBERS_QUERY = """
query($team: ID!, $cursor: String) {
    node(id: $team) {
        ... on Team {
            members(after: $cursor) {
                pageInfo {
                    endCursor
                    hasNextPage
                }
                edges {
                    role
                    node {
                        databaseId
                        login
                    }
                }
            }
        }
    }
}
"""


def _node_id(kind: str, database_id: int) -> str:
    return base64.b64encode(f"04:{kind}{database_id}".encode()).decode("ascii")


def user_node_id(database_id: int) -> str:
    """
    Encode a user's database id as a GraphQL global node id.

    The encoding must match GitHub's own scheme exactly: a wrong id does not
    fail, the node just resolves to null.
    """
    return _node_id("User", database_id)


def team_node_id(database_id: int) -> str:
    """Encode a team's database id as a GraphQL global node id."""
    return _node_id("Team", database_id)


@dataclass(frozen=True)
class PageInfo:
    """Cursor state of a GraphQL connection."""

    end_cursor: str | None
    has_next_page: bool

    @classmethod
    def start(cls) -> "PageInfo":
        """State before the first page has been fetched."""
        return cls(end_cursor=None, has_next_page=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageInfo":
        try:
            return cls(
                end_cursor=data.get("endCursor"),
                has_next_page=bool(data["hasNextPage"]),
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ProtocolError(f"Malformed pageInfo: {data!r}") from e


class GraphQLEngine:
    """Runs GraphQL queries through the shared HTTP transport."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def execute(
        self,
        query: str,
        variables: dict[str, Any],
        operation: str = "query",
    ) -> dict[str, Any]:
        """
        Execute a query and return its ``data``.

        Args:
            query: GraphQL query document
            variables: Query variables
            operation: Short name used in logs

        Returns:
            The ``data`` member of the response

        Raises:
            APIError: If the HTTP request itself fails
            GraphQLError: If the response lists errors (first message is used)
            ProtocolError: If the response has neither data nor errors
        """
        log_graphql_query(operation, variables)

        result = self.transport.request_json(
            "POST",
            self.transport.graphql_url,
            body={"query": query, "variables": variables},
        )
        if not isinstance(result, dict):
            raise ProtocolError(f"Unexpected GraphQL response: {result!r}")

        errors = result.get("errors") or []
        if errors:
            first = errors[0]
            message = first.get("message") if isinstance(first, dict) else str(first)
            raise GraphQLError(message or "unknown error", errors)

        data = result.get("data")
        if data is None:
            raise ProtocolError("missing graphql data")
        return data
