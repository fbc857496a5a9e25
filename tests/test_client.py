"""
Tests for GitHubClient construction and configuration.
"""

import pytest

from teamsync import GitHubClient, __version__
from teamsync.config import DEFAULT_BASE_URL, ClientConfig, parse_bool
from teamsync.exceptions import ConfigurationError
from teamsync.testing import MockGitHubAPI, client_for, team_payload


class TestGitHubClient:
    """Tests for GitHubClient."""

    def test_requires_token(self) -> None:
        with pytest.raises(ConfigurationError):
            GitHubClient()

    def test_resource_clients_share_transport(self) -> None:
        with GitHubClient(token="t") as client:
            assert client.teams.transport is client.transport
            assert client.repos.transport is client.transport
            assert client.branches.transport is client.transport
            assert client.orgs.graphql is client.graphql
            assert client.graphql.transport is client.transport

    def test_dry_run_flag(self) -> None:
        with GitHubClient(token="t", dry_run=True) as client:
            assert client.dry_run is True
            assert client.transport.dry_run is True

    def test_sends_standard_headers(self, mock_api: MockGitHubAPI) -> None:
        mock_api.add("GET", "orgs/acme/teams/infra", json=team_payload(1, "infra"))

        with client_for(mock_api, token="ghp_example") as client:
            client.teams.team("acme", "infra")

        headers = mock_api.calls[0].headers
        assert headers["authorization"] == "token ghp_example"
        assert headers["user-agent"] == f"teamsync/{__version__}"
        assert headers["accept"] == "application/vnd.github+json"

    def test_custom_base_url(self) -> None:
        api = MockGitHubAPI(base_url="https://ghe.example.com/api/v3")
        api.add("GET", "orgs/acme/teams/infra", json=team_payload(1, "infra"))

        with client_for(api) as client:
            assert client.teams.team("acme", "infra") is not None

        assert api.calls[0].url == "https://ghe.example.com/api/v3/orgs/acme/teams/infra"

    def test_enterprise_graphql_endpoint(self) -> None:
        api = MockGitHubAPI(base_url="https://ghe.example.com/api/v3")
        api.add_graphql({"nodes": [{"databaseId": 1, "login": "octocat"}]})

        with client_for(api, dry_run=True) as client:
            assert client.orgs.usernames([1]) == {1: "octocat"}

        assert api.calls[0].url == "https://ghe.example.com/api/graphql"

    def test_from_config(self) -> None:
        config = ClientConfig(token="t", dry_run=True)
        with GitHubClient.from_config(config) as client:
            assert client.config is config


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self) -> None:
        config = ClientConfig(token="t")
        assert config.base_url == DEFAULT_BASE_URL
        assert config.dry_run is False
        assert config.user_agent == f"teamsync/{__version__}"

    def test_repr_masks_token(self) -> None:
        assert "ghp_supersecret" not in repr(ClientConfig(token="ghp_supersecret"))

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        monkeypatch.setenv("TEAMSYNC_DRY_RUN", "yes")
        monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")

        config = ClientConfig.from_env()

        assert config.token == "env-token"
        assert config.dry_run is True
        assert config.base_url == "https://ghe.example.com/api/v3"

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        monkeypatch.delenv("TEAMSYNC_DRY_RUN", raising=False)
        monkeypatch.delenv("GITHUB_API_URL", raising=False)

        config = ClientConfig.from_env()

        assert config.dry_run is False
        assert config.base_url == DEFAULT_BASE_URL

    def test_from_env_missing_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)

        with pytest.raises(ConfigurationError):
            ClientConfig.from_env()

    def test_client_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        monkeypatch.setenv("TEAMSYNC_DRY_RUN", "1")

        with GitHubClient.from_env() as client:
            assert client.dry_run is True

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
    def test_parse_bool_true(self, value: str) -> None:
        assert parse_bool(value, "X") is True

    @pytest.mark.parametrize("value", ["", "0", "false", "No", "off"])
    def test_parse_bool_false(self, value: str) -> None:
        assert parse_bool(value, "X") is False

    def test_parse_bool_invalid(self) -> None:
        with pytest.raises(ConfigurationError, match="TEAMSYNC_DRY_RUN"):
            parse_bool("maybe", "TEAMSYNC_DRY_RUN")
