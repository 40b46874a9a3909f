"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import GitHubLabel, GitHubUser, IssueEvent, PullRequest

__all__ = [
    "GitHubClient",
    "GitHubUser",
    "GitHubLabel",
    "IssueEvent",
    "PullRequest",
]
