"""
Tests for teamsync logging: token masking and logger configuration.
"""

import io
import logging

from hypothesis import given, settings
from hypothesis import strategies as st

from teamsync.logging import (
    configure_logging,
    get_logger,
    log_graphql_query,
    log_http_request,
    mask_sensitive_data,
    safe_log_dict,
)
from teamsync.testing import MockGitHubAPI, client_for, team_payload

token_body_strategy = st.text(
    alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"),
    min_size=36,
    max_size=40,
)


def _capture(level: int = logging.DEBUG) -> tuple[io.StringIO, logging.Handler]:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    configure_logging(level=level, handler=handler, format_string="%(name)s %(message)s")
    return stream, handler


def _release(handler: logging.Handler) -> None:
    get_logger().removeHandler(handler)
    get_logger().setLevel(logging.NOTSET)
    get_logger("http").setLevel(logging.NOTSET)
    get_logger("graphql").setLevel(logging.NOTSET)


@given(body=token_body_strategy, prefix=st.sampled_from(["ghp_", "gho_", "ghs_", "github_pat_"]))
@settings(max_examples=100)
def test_tokens_masked(body: str, prefix: str) -> None:
    """No GitHub token survives masking, bare or in an Authorization value."""
    token = prefix + body
    assert token not in mask_sensitive_data(f"using {token} for requests")
    assert token not in mask_sensitive_data(f"Authorization: token {token}")


def test_safe_log_dict_redacts_nested_keys() -> None:
    data = {
        "Authorization": "token abc",
        "nested": {"api_key": "k", "ok": 1},
        "items": [{"password": "p"}],
    }
    assert safe_log_dict(data) == {
        "Authorization": "[REDACTED]",
        "nested": {"api_key": "[REDACTED]", "ok": 1},
        "items": [{"password": "[REDACTED]"}],
    }


def test_get_logger_names() -> None:
    assert get_logger().name == "teamsync"
    assert get_logger("http").name == "teamsync.http"
    assert get_logger("graphql").name == "teamsync.graphql"


def test_request_log_hides_token() -> None:
    stream, handler = _capture()
    try:
        api = MockGitHubAPI()
        api.add("GET", "orgs/acme/teams/infra", json=team_payload(1, "infra"))
        with client_for(api, token="ghp_" + "x" * 36) as client:
            client.teams.team("acme", "infra")
    finally:
        _release(handler)

    output = stream.getvalue()
    assert "teamsync.http GET https://api.github.com/orgs/acme/teams/infra" in output
    assert "Response 200" in output
    assert "x" * 36 not in output


def test_http_level_independent() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    configure_logging(level=logging.DEBUG, http_level=logging.WARNING, handler=handler)
    try:
        log_http_request("GET", "https://api.github.com/user")
        log_graphql_query("usernames", {"ids": ["MDQ6VXNlcjE="]})
    finally:
        _release(handler)

    output = stream.getvalue()
    assert "GET https://api.github.com/user" not in output
    assert "query usernames" in output


def test_response_log_includes_next_page() -> None:
    stream, handler = _capture()
    try:
        api = MockGitHubAPI()
        api.add_page("orgs/acme/teams", [team_payload(1, "infra")], next_path="organizations/1/teams?page=2")
        api.add_page("organizations/1/teams?page=2", [team_payload(2, "docs")])
        with client_for(api) as client:
            client.orgs.org_teams("acme")
    finally:
        _release(handler)

    lines = [line for line in stream.getvalue().splitlines() if "Response 200" in line]
    assert len(lines) == 2
    assert "next=https://api.github.com/organizations/1/teams?page=2" in lines[0]
    assert "next=" not in lines[1]
