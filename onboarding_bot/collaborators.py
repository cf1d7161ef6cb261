#!/usr/bin/env python3
"""
Collaborator checks and invitations for the Collaborator Onboarding Bot.

This module asks GitHub whether a user already collaborates on the target
repository and invites them when they do not, waiting out rate limits.
"""

import asyncio
import logging
import time

import aiohttp

from .config import Config
from .exceptions import GitHubAPIError, RateLimitExceededError
from .github_client import GitHubClient
from .models import CollaboratorCheck, CollaboratorStatus


class CollaboratorManager:
    """Checks and invites collaborators on the target repository"""

    def __init__(self, config: Config, github_client: GitHubClient):
        self.config = config
        self.github_client = github_client

    async def check(self, session: aiohttp.ClientSession, username: str) -> CollaboratorCheck:
        """Classify a user's membership of the target repository"""
        try:
            status = await self.github_client.check_collaborator(
                session,
                self.config.target_owner,
                self.config.target_repo,
                username
            )
        except GitHubAPIError as e:
            if e.status == 404:
                return CollaboratorCheck(CollaboratorStatus.NOT_FOUND, http_status=404)
            return CollaboratorCheck(CollaboratorStatus.ERROR, http_status=e.status, detail=str(e))
        except aiohttp.ClientError as e:
            return CollaboratorCheck(CollaboratorStatus.ERROR, detail=str(e))

        if status == 204:
            return CollaboratorCheck(CollaboratorStatus.ALREADY_COLLABORATOR, http_status=status)
        return CollaboratorCheck(CollaboratorStatus.NOT_COLLABORATOR, http_status=status)

    async def invite(self, session: aiohttp.ClientSession, username: str):
        """Invite a user with read access, retrying while rate limited"""
        max_attempts = self.config.max_invite_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                await self.github_client.add_collaborator(
                    session,
                    self.config.target_owner,
                    self.config.target_repo,
                    username,
                    permission="pull"
                )
                logging.info(f"Invited {username} to {self.config.target_owner}/{self.config.target_repo}")
                return
            except GitHubAPIError as e:
                if not e.is_rate_limited:
                    self._handle_invite_error(username, e)
                    return
                if attempt == max_attempts:
                    raise RateLimitExceededError(
                        f"Still rate limited after {attempt} attempts to invite {username}",
                        attempt
                    ) from e
                await self._wait_for_reset(e, attempt)
            except aiohttp.ClientError as e:
                self._handle_invite_error(username, e)
                return

    async def _wait_for_reset(self, error: GitHubAPIError, attempt: int):
        reset = error.rate_limit_reset
        wait_seconds = max(0, reset - int(time.time())) if reset is not None else 0

        if wait_seconds > self.config.max_rate_limit_wait:
            raise RateLimitExceededError(
                f"Rate limit resets in {wait_seconds}s, longer than the "
                f"{self.config.max_rate_limit_wait}s allowed",
                attempt
            ) from error

        logging.warning(f"Rate limit exceeded. Waiting for {wait_seconds} seconds before retrying.")
        await asyncio.sleep(wait_seconds)

    def _handle_invite_error(self, username: str, error: Exception):
        logging.exception(f"Failed to invite {username}: {error}")
        if not self.config.invite_best_effort:
            raise error
        logging.error(f"Continuing without an invitation for {username} (best-effort mode)")
