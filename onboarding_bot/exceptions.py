#!/usr/bin/env python3
"""
Exception classes for the Collaborator Onboarding Bot.
"""

from typing import Mapping, Optional


class OnboardingError(Exception):
    """Base exception for all onboarding bot errors."""


class ConfigurationError(OnboardingError):
    """Raised when required configuration is missing or invalid."""


class EventPayloadError(OnboardingError):
    """Raised when the triggering event payload is missing fields."""


class UsernameNotFoundError(OnboardingError):
    """Raised when the issue title does not mention a username."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"No @username found in issue title: {title!r}")


class AuthenticationError(OnboardingError):
    """Raised when an installation access token cannot be obtained."""


class GitHubAPIError(OnboardingError):
    """Raised when the GitHub API answers with an unexpected status."""

    def __init__(self, status: int, message: str, headers: Optional[Mapping[str, str]] = None):
        self.status = status
        self.message = message
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        super().__init__(f"GitHub API error {status}: {message}")

    @property
    def is_rate_limited(self) -> bool:
        return self.status == 403 and self.headers.get("x-ratelimit-remaining") == "0"

    @property
    def rate_limit_reset(self) -> Optional[int]:
        reset = self.headers.get("x-ratelimit-reset")
        if reset is None or not str(reset).isdigit():
            return None
        return int(reset)


class RateLimitExceededError(OnboardingError):
    """Raised when rate-limit retries are exhausted or the wait is too long."""

    def __init__(self, message: str, attempts: int):
        self.attempts = attempts
        super().__init__(message)
