#!/usr/bin/env python3
"""
Collaborator Onboarding Bot Package

Invites the user mentioned in a request issue as a collaborator on a target
repository, then comments on, labels and closes the issue.
"""

__version__ = "1.0.0"

# Define what's available for import
__all__ = [
    # Models
    "CollaboratorStatus",
    "CollaboratorCheck",
    "IssueEvent",
    "RunOutcome",

    # Core components
    "Config",
    "GitHubClient",
    "AppAuthenticator",
    "CollaboratorManager",
    "IssueResponder",
    "Onboarder",
    "extract_username",
]

# Lazy imports so the models can be used without aiohttp or PyJWT installed
def _import_models():
    """Import models module."""
    from .models import CollaboratorStatus, CollaboratorCheck, IssueEvent, RunOutcome
    return CollaboratorStatus, CollaboratorCheck, IssueEvent, RunOutcome

def _import_config():
    """Import config module."""
    from .config import Config
    return Config

def _import_github_client():
    """Import GitHub client module."""
    from .github_client import GitHubClient
    return GitHubClient

def _import_auth():
    """Import authentication module."""
    from .auth import AppAuthenticator
    return AppAuthenticator

def _import_collaborators():
    """Import collaborators module."""
    from .collaborators import CollaboratorManager
    return CollaboratorManager

def _import_responder():
    """Import responder module."""
    from .responder import IssueResponder
    return IssueResponder

def _import_onboarder():
    """Import onboarder module."""
    from .onboarder import Onboarder
    return Onboarder

def _import_extract_username():
    from .event_parser import extract_username
    return extract_username


def __getattr__(name):
    importers = {
        "CollaboratorStatus": lambda: _import_models()[0],
        "CollaboratorCheck": lambda: _import_models()[1],
        "IssueEvent": lambda: _import_models()[2],
        "RunOutcome": lambda: _import_models()[3],
        "Config": _import_config,
        "GitHubClient": _import_github_client,
        "AppAuthenticator": _import_auth,
        "CollaboratorManager": _import_collaborators,
        "IssueResponder": _import_responder,
        "Onboarder": _import_onboarder,
        "extract_username": _import_extract_username,
    }
    if name in importers:
        return importers[name]()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
