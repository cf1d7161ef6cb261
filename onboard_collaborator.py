#!/usr/bin/env python3
"""
Collaborator Onboarding Bot

Run from a GitHub Actions workflow on 'issues: opened'. Invites the user
mentioned in the issue title to the target repository and closes the issue.

This is the main entry point that uses the onboarding_bot package.
"""

import asyncio
import sys
from pathlib import Path

# Add the current directory to the Python path
sys.path.insert(0, str(Path(__file__).parent))

from onboarding_bot.onboarder import main


if __name__ == "__main__":
    asyncio.run(main())
