#!/usr/bin/env python3
"""
Data models for the Collaborator Onboarding Bot.

This module contains the data classes and enums shared between the
event parser, the collaborator checker and the issue responder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .exceptions import EventPayloadError


class CollaboratorStatus(Enum):
    """Outcome of a collaborator check"""
    ALREADY_COLLABORATOR = "already_collaborator"
    NOT_COLLABORATOR = "not_collaborator"
    NOT_FOUND = "not_found"
    ERROR = "error"


class RunOutcome(Enum):
    """What a single onboarding run did"""
    SKIPPED_OWNER = "skipped_owner"
    INVITED = "invited"
    ALREADY_MEMBER = "already_member"
    NO_ACTION = "no_action"


@dataclass
class CollaboratorCheck:
    """Result of checking a user against the target repository"""
    status: CollaboratorStatus
    http_status: Optional[int] = None
    detail: Optional[str] = None


@dataclass
class IssueEvent:
    """The parts of an issue event payload the bot acts on"""
    title: str
    issue_number: int
    repo_owner: str
    repo_name: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "IssueEvent":
        """Build an event from a GitHub 'issues' webhook payload."""
        issue = payload.get("issue")
        repository = payload.get("repository")
        if not issue or not repository:
            raise EventPayloadError("Event payload must contain 'issue' and 'repository'")

        try:
            return cls(
                title=issue["title"],
                issue_number=int(issue["number"]),
                repo_owner=repository["owner"]["login"],
                repo_name=repository["name"]
            )
        except (KeyError, TypeError, ValueError) as e:
            raise EventPayloadError(f"Malformed event payload: {e}") from e
