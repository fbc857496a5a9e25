"""
Pytest plugin for teamsync testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest. To use them, add this to your conftest.py:

    pytest_plugins = ["teamsync.testing.conftest"]

Or import the fixtures directly:

    from teamsync.testing.fixtures import mock_api, client
"""

# Re-export all fixtures for pytest discovery
from teamsync.testing.fixtures import (
    client,
    dry_run_client,
    mock_api,
    sample_branch_protection,
    sample_repo,
    sample_team,
)

__all__ = [
    "mock_api",
    "client",
    "dry_run_client",
    "sample_team",
    "sample_repo",
    "sample_branch_protection",
]
