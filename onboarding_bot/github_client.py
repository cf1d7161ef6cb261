#!/usr/bin/env python3
"""
GitHub API client for the Collaborator Onboarding Bot.

This module provides the GitHub API interactions the bot needs:
collaborator checks and invitations, comments, labels and closing issues.
"""

from typing import List

import aiohttp

from .exceptions import GitHubAPIError


async def raise_for_status(resp: aiohttp.ClientResponse, expected: List[int]):
    """Raise GitHubAPIError unless the response status is one of expected"""
    if resp.status in expected:
        return
    try:
        data = await resp.json()
        message = data.get("message", "") if isinstance(data, dict) else str(data)
    except (aiohttp.ContentTypeError, ValueError):
        message = await resp.text()
    raise GitHubAPIError(resp.status, message, dict(resp.headers))


class GitHubClient:
    """GitHub API client scoped to an installation token"""

    def __init__(self, token: str, api_url: str = "https://api.github.com"):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.headers = {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github.v3+json"
        }

    def _repo_url(self, owner: str, repo: str) -> str:
        return f"{self.api_url}/repos/{owner}/{repo}"

    async def check_collaborator(
        self,
        session: aiohttp.ClientSession,
        owner: str,
        repo: str,
        username: str
    ) -> int:
        """Check collaborator membership; returns the status code on 2xx"""
        url = f"{self._repo_url(owner, repo)}/collaborators/{username}"
        async with session.get(url, headers=self.headers) as resp:
            if 200 <= resp.status < 300:
                return resp.status
            await raise_for_status(resp, [])

    async def add_collaborator(
        self,
        session: aiohttp.ClientSession,
        owner: str,
        repo: str,
        username: str,
        permission: str = "pull"
    ):
        """Invite a user as a collaborator"""
        url = f"{self._repo_url(owner, repo)}/collaborators/{username}"
        async with session.put(url, headers=self.headers, json={"permission": permission}) as resp:
            await raise_for_status(resp, [201, 204])

    async def create_comment(
        self,
        session: aiohttp.ClientSession,
        owner: str,
        repo: str,
        issue_number: int,
        body: str
    ):
        """Create a comment on an issue"""
        url = f"{self._repo_url(owner, repo)}/issues/{issue_number}/comments"
        async with session.post(url, headers=self.headers, json={"body": body}) as resp:
            await raise_for_status(resp, [200, 201])

    async def add_labels(
        self,
        session: aiohttp.ClientSession,
        owner: str,
        repo: str,
        issue_number: int,
        labels: List[str]
    ):
        """Add labels to an issue, keeping the ones already there"""
        url = f"{self._repo_url(owner, repo)}/issues/{issue_number}/labels"
        async with session.post(url, headers=self.headers, json={"labels": list(labels)}) as resp:
            await raise_for_status(resp, [200, 201])

    async def close_issue(
        self,
        session: aiohttp.ClientSession,
        owner: str,
        repo: str,
        issue_number: int
    ):
        """Close an issue"""
        url = f"{self._repo_url(owner, repo)}/issues/{issue_number}"
        async with session.patch(url, headers=self.headers, json={"state": "closed"}) as resp:
            await raise_for_status(resp, [200])

