#!/usr/bin/env python3
"""
GitHub App authentication for the Collaborator Onboarding Bot.

Signs an app JWT with the app's private key and exchanges it for an
installation access token, yielding a GitHubClient scoped to that
installation.
"""

import logging
import time

import aiohttp
import jwt

from .config import Config
from .exceptions import AuthenticationError, GitHubAPIError
from .github_client import GitHubClient, raise_for_status


# GitHub rejects app JWTs that live longer than ten minutes
JWT_LIFETIME_SECONDS = 600
CLOCK_DRIFT_SECONDS = 60


class AppAuthenticator:
    """Obtains installation-scoped clients for a GitHub App"""

    def __init__(self, config: Config):
        self.config = config

    def create_app_jwt(self, now: int = None) -> str:
        """Create an RS256 JWT identifying the app"""
        now = int(time.time()) if now is None else now
        payload = {
            "iat": now - CLOCK_DRIFT_SECONDS,
            "exp": now + JWT_LIFETIME_SECONDS,
            "iss": str(self.config.app_id)
        }
        try:
            return jwt.encode(payload, self.config.private_key, algorithm="RS256")
        except (ValueError, TypeError, jwt.PyJWTError) as e:
            raise AuthenticationError(f"Could not sign app JWT: {e}") from e

    async def get_installation_client(self, session: aiohttp.ClientSession) -> GitHubClient:
        """Exchange the app JWT for an installation token and return a client"""
        app_jwt = self.create_app_jwt()
        url = f"{self.config.api_url}/app/installations/{self.config.installation_id}/access_tokens"
        headers = {
            "Authorization": f"Bearer {app_jwt}",
            "Accept": "application/vnd.github.v3+json"
        }

        try:
            async with session.post(url, headers=headers) as resp:
                await raise_for_status(resp, [201])
                data = await resp.json()
        except GitHubAPIError as e:
            raise AuthenticationError(
                f"Failed to get installation token for {self.config.installation_id}: {e}"
            ) from e

        token = data.get("token")
        if not token:
            raise AuthenticationError("Installation token response did not include a token")

        logging.info(f"Authenticated as installation {self.config.installation_id}")
        return GitHubClient(token, self.config.api_url)
