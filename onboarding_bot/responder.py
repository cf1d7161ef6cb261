#!/usr/bin/env python3
"""
Issue responses for the Collaborator Onboarding Bot.
"""

import logging

import aiohttp

from .github_client import GitHubClient
from .models import IssueEvent


ADDED_LABEL = "collaborator added"
DUPLICATE_LABEL = "duplicate request"


def added_message(username: str) -> str:
    return (
        f"@{username} has been added as a member of this repository. "
        "Please check your email or notifications for an invitation."
    )


def already_member_message(username: str) -> str:
    return f"@{username} is already a member of this repository."


class IssueResponder:
    """Comments on, labels and closes the request issue"""

    def __init__(self, github_client: GitHubClient):
        self.github_client = github_client

    async def respond(self, session: aiohttp.ClientSession, event: IssueEvent, comment: str, label: str):
        """Comment, label and close, in that order; nothing is rolled back"""
        owner, repo, number = event.repo_owner, event.repo_name, event.issue_number

        await self.github_client.create_comment(session, owner, repo, number, comment)
        logging.info(f"Commented on {owner}/{repo}#{number}")

        await self.github_client.add_labels(session, owner, repo, number, [label])
        logging.info(f"Labelled {owner}/{repo}#{number} '{label}'")

        await self.github_client.close_issue(session, owner, repo, number)
        logging.info(f"Closed {owner}/{repo}#{number}")

    async def report_added(self, session: aiohttp.ClientSession, event: IssueEvent, username: str):
        await self.respond(session, event, added_message(username), ADDED_LABEL)

    async def report_already_member(self, session: aiohttp.ClientSession, event: IssueEvent, username: str):
        await self.respond(session, event, already_member_message(username), DUPLICATE_LABEL)
