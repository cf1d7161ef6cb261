#!/usr/bin/env python3
"""
Main workflow for the Collaborator Onboarding Bot.

This module coordinates authentication, event parsing, the collaborator
check, the invitation and the issue response for a single issue event.
"""

import asyncio
import logging
import sys
from typing import Optional

import aiohttp

from .auth import AppAuthenticator
from .collaborators import CollaboratorManager
from .config import Config
from .event_parser import extract_username, load_event
from .github_client import GitHubClient
from .models import CollaboratorStatus, IssueEvent, RunOutcome
from .responder import IssueResponder


class Onboarder:
    """Runs the onboarding workflow for one issue event"""

    def __init__(self, config: Config):
        self.config = config
        self.authenticator = AppAuthenticator(config)

    async def run(self, event: IssueEvent, session: Optional[aiohttp.ClientSession] = None) -> RunOutcome:
        """Authenticate, then handle the event"""
        if session is None:
            async with aiohttp.ClientSession() as session:
                return await self.run(event, session)

        github_client = await self.authenticator.get_installation_client(session)
        return await self.process(session, github_client, event)

    async def process(
        self,
        session: aiohttp.ClientSession,
        github_client: GitHubClient,
        event: IssueEvent
    ) -> RunOutcome:
        """Check the requester and respond on the issue"""
        username = extract_username(event.title)

        logging.info(
            f"Parsed event values: repo={self.config.target_repo} "
            f"requester={username} owner={self.config.target_owner} "
            f"issue={event.repo_owner}/{event.repo_name}#{event.issue_number}"
        )

        # Never invite the owner to their own repository
        if username == self.config.target_owner:
            logging.info("Requester is the owner of the target repository; exiting.")
            return RunOutcome.SKIPPED_OWNER

        collaborators = CollaboratorManager(self.config, github_client)
        responder = IssueResponder(github_client)

        check = await collaborators.check(session, username)
        logging.info(f"Collaborator check for {username}: {check.status.value}")

        if check.status == CollaboratorStatus.NOT_FOUND:
            await collaborators.invite(session, username)
            await responder.report_added(session, event, username)
            return RunOutcome.INVITED
        elif check.status == CollaboratorStatus.ALREADY_COLLABORATOR:
            await responder.report_already_member(session, event, username)
            return RunOutcome.ALREADY_MEMBER
        elif check.status == CollaboratorStatus.NOT_COLLABORATOR:
            logging.warning(f"Unexpected status {check.http_status} checking {username}; leaving issue open")
        else:
            logging.warning(f"Could not check {username}: {check.detail}; leaving issue open")
        return RunOutcome.NO_ACTION


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def record_failure(message: str):
    """Mark the workflow step as failed"""
    # GitHub Actions workflow command; newlines must be escaped
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    print(f"::error::{escaped}", flush=True)


async def main():
    """Main entry point"""
    setup_logging()
    try:
        config = Config()
        event = await load_event(config.event_path)
        outcome = await Onboarder(config).run(event)
        logging.info(f"Onboarding finished: {outcome.value}")
    except Exception as e:
        logging.error(f"Full error: {e!r}")
        record_failure(str(e))
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
