"""Branch-related data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Commit:
    """Commit reference."""

    sha: str


@dataclass(frozen=True)
class Branch:
    """A branch and its head commit."""

    name: str
    commit: Commit


@dataclass(frozen=True)
class BranchProtection:
    """Desired protection settings for a branch."""

    dismiss_stale_reviews: bool
    required_approving_review_count: int
    required_checks: list[str] = field(default_factory=list)
    allowed_users: list[str] = field(default_factory=list)
