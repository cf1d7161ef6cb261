#!/usr/bin/env python3
"""
Event parsing for the Collaborator Onboarding Bot.

Reads the issue event delivered by the workflow runner and pulls the
requester's username out of the issue title.
"""

import json
import re

import aiofiles

from .exceptions import EventPayloadError, UsernameNotFoundError
from .models import IssueEvent


USERNAME_PATTERN = re.compile(r"(?<=@)[a-z0-9-]+", re.IGNORECASE)


def extract_username(title: str) -> str:
    """Return the first @-mentioned username in an issue title"""
    match = USERNAME_PATTERN.search(title or "")
    if match is None:
        raise UsernameNotFoundError(title)
    return match.group(0)


async def load_event(event_path: str) -> IssueEvent:
    """Load the issue event payload written by the workflow runner"""
    if not event_path:
        raise EventPayloadError("GITHUB_EVENT_PATH is not set")

    try:
        async with aiofiles.open(event_path) as f:
            payload = json.loads(await f.read())
    except FileNotFoundError as e:
        raise EventPayloadError(f"Event payload not found: {event_path}") from e
    except json.JSONDecodeError as e:
        raise EventPayloadError(f"Event payload is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise EventPayloadError("Event payload must be a JSON object")

    return IssueEvent.from_payload(payload)
