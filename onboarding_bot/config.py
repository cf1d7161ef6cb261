#!/usr/bin/env python3
"""
Configuration management for the Collaborator Onboarding Bot.

This module handles loading and validating configuration from the
process environment provided by the workflow runner.
"""

import os
from typing import Mapping, Optional

from .exceptions import ConfigurationError


REQUIRED_FIELDS = ["TARGET_OWNER", "TARGET_REPO", "APP_ID", "PRIVATE_KEY", "INSTALLATION_ID"]


class Config:
    """Configuration management"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._config = self._load_config(os.environ if environ is None else environ)

    def _load_config(self, environ: Mapping[str, str]) -> dict:
        """Load configuration from an environment mapping"""
        config = dict(environ)

        for field in REQUIRED_FIELDS:
            if not config.get(field):
                raise ConfigurationError(f"Missing required config field: {field}")

        # Fail early on malformed numbers rather than mid-run
        for field in ("INVITE_MAX_ATTEMPTS", "RATE_LIMIT_MAX_WAIT"):
            value = config.get(field)
            if value is not None and not value.strip().isdigit():
                raise ConfigurationError(f"Config field {field} must be a non-negative integer, got {value!r}")

        return config

    @property
    def target_owner(self) -> str:
        return self._config["TARGET_OWNER"]

    @property
    def target_repo(self) -> str:
        return self._config["TARGET_REPO"]

    @property
    def app_id(self) -> str:
        return self._config["APP_ID"]

    @property
    def private_key(self) -> str:
        """PEM private key with literal '\\n' escapes turned into newlines"""
        return self._config["PRIVATE_KEY"].replace("\\n", "\n")

    @property
    def installation_id(self) -> str:
        return self._config["INSTALLATION_ID"]

    @property
    def event_path(self) -> str:
        return self._config.get("GITHUB_EVENT_PATH", "")

    @property
    def api_url(self) -> str:
        return self._config.get("GITHUB_API_URL", "https://api.github.com").rstrip("/")

    @property
    def max_invite_attempts(self) -> int:
        return max(1, int(self._config.get("INVITE_MAX_ATTEMPTS", 5)))

    @property
    def max_rate_limit_wait(self) -> int:
        return int(self._config.get("RATE_LIMIT_MAX_WAIT", 3600))

    @property
    def invite_best_effort(self) -> bool:
        return self._config.get("INVITE_BEST_EFFORT", "false").strip().lower() in ("1", "true", "yes")
