"""Team-related data models."""

from dataclasses import dataclass
from enum import Enum


class TeamPrivacy(str, Enum):
    """Team visibility inside the organization."""

    CLOSED = "closed"
    SECRET = "secret"


class TeamRole(str, Enum):
    """
    Role of a user inside a team.

    REST writes the lower-case form, GraphQL reads back "MEMBER" and
    "MAINTAINER"; ``from_wire`` accepts both.
    """

    MEMBER = "member"
    MAINTAINER = "maintainer"

    @classmethod
    def from_wire(cls, value: str) -> "TeamRole":
        return cls(value.lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Team:
    """A team in an organization."""

    # None marks a team "created" by a dry run that does not exist on GitHub
    id: int | None
    name: str
    description: str
    privacy: TeamPrivacy


@dataclass(frozen=True)
class TeamMember:
    """A user's membership in a team."""

    username: str
    role: TeamRole
