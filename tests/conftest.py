"""Shared fixtures for the teamsync test suite."""

pytest_plugins = ["teamsync.testing.conftest"]
