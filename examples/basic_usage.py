#!/usr/bin/env python3
"""
Basic teamsync usage example.

Audits one organization in dry-run mode: nothing is changed on GitHub.
Run with: GITHUB_TOKEN=... python examples/basic_usage.py <org> [repo]
"""

import logging
import sys

from teamsync import (
    BranchProtection,
    ClientConfig,
    DryRunViolation,
    GitHubClient,
    GitHubError,
    TeamPrivacy,
    configure_logging,
)

if len(sys.argv) < 2:
    print("usage: basic_usage.py <org> [repo]")
    sys.exit(2)

org = sys.argv[1]
repo_name = sys.argv[2] if len(sys.argv) > 2 else None

configure_logging(level=logging.INFO, http_level=logging.DEBUG)

# Always dry-run here, whatever TEAMSYNC_DRY_RUN says
env_config = ClientConfig.from_env()
config = ClientConfig(
    token=env_config.token,
    dry_run=True,
    base_url=env_config.base_url,
    timeout=env_config.timeout,
)
print(f"=== teamsync audit of {org} ({config!r}) ===\n")

with GitHubClient.from_config(config) as client:
    # 1. Organization owners and teams
    owners = client.orgs.org_owners(org)
    names = client.orgs.usernames(owners)
    print(f"1. Owners: {', '.join(sorted(names.values()))}")

    teams = client.orgs.org_teams(org)
    print(f"   Teams: {len(teams)}\n")

    # 2. Members of each team
    print("2. Team memberships...")
    for name in sorted(teams):
        team = client.teams.team(org, name)
        if team is None:
            continue
        members = client.teams.team_memberships(team)
        listing = ", ".join(f"{m.username} ({m.role})" for m in members.values())
        print(f"   {team.name}: {listing or '(empty)'}")

    # 3. Dry-run mutations return without contacting GitHub
    print("\n3. Dry-run mutations...")
    team = client.teams.create_team(org, "example-team", "Created by example", TeamPrivacy.CLOSED)
    print(f"   create_team returned id={team.id}")
    print(f"   team_memberships of it: {client.teams.team_memberships(team)}")

    # 4. Repository access and branch protection
    if repo_name is not None:
        repo = client.repos.repo(org, repo_name)
        if repo is None:
            print(f"\n4. Repository {org}/{repo_name} not found")
        else:
            print(f"\n4. {org}/{repo.name} (default branch {repo.default_branch})")
            for repo_team in client.repos.repo_teams(org, repo.name):
                print(f"   team {repo_team.name}: {repo_team.permission.value}")
            for user in client.repos.repo_collaborators(org, repo.name):
                print(f"   user {user.name}: {user.permission.value}")
            print(f"   protected: {sorted(client.branches.protected_branches(repo))}")

            protection = BranchProtection(
                dismiss_stale_reviews=True,
                required_approving_review_count=1,
                required_checks=["CI"],
            )
            applied = client.branches.update_branch_protection(
                repo, repo.default_branch, protection
            )
            print(f"   update_branch_protection (dry-run): {applied}")

    # 5. The transport refuses mutating REST calls in dry-run mode
    print("\n5. Dry-run guard...")
    try:
        client.transport.send("DELETE", f"orgs/{org}/teams/example-team")
    except DryRunViolation as e:
        print(f"   Refused: {e}")
    except GitHubError as e:
        print(f"   Unexpected API error: {e}")

print("\n=== Done ===")
