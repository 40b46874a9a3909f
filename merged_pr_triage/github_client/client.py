"""GitHub API client using PyGitHub."""

import logging
import os

from github import Github
from github.GithubException import UnknownObjectException
from github.IssueEvent import IssueEvent as GithubIssueEvent
from github.Label import Label
from github.NamedUser import NamedUser
from github.Organization import Organization
from github.PullRequest import PullRequest as GithubPullRequest
from github.Repository import Repository

from .models import GitHubLabel, GitHubUser, IssueEvent, PullRequest

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API client for reading pull requests and applying triage."""

    def __init__(self, token: str | None = None, per_page: int = 100):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            per_page: Page size used for paginated listings.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token, per_page=per_page)
        self._repositories: dict[str, Repository] = {}
        self._organizations: dict[str, Organization] = {}

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color,
            description=github_label.description,
        )

    def _convert_pull_request(self, github_pr: GithubPullRequest) -> PullRequest:
        """Convert PyGitHub pull request to our model."""
        return PullRequest(
            number=github_pr.number,
            title=github_pr.title,
            user=self._convert_user(github_pr.user),
            created_at=github_pr.created_at,
            merged_at=github_pr.merged_at,
            assignees=[self._convert_user(user) for user in github_pr.assignees],
            labels=[self._convert_label(label) for label in github_pr.labels],
        )

    def _convert_event(self, github_event: GithubIssueEvent) -> IssueEvent:
        """Convert PyGitHub issue event to our model."""
        actor = github_event.actor.login if github_event.actor else None
        return IssueEvent(event=github_event.event, actor=actor)

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object."""
        full_name = f"{org}/{repo}"
        if full_name not in self._repositories:
            try:
                self._repositories[full_name] = self.github.get_repo(full_name)
            except UnknownObjectException:
                raise ValueError(f"Repository {org}/{repo} not found")
        return self._repositories[full_name]

    def list_closed_pull_requests(
        self, org: str, repo: str, base: str, page: int
    ) -> list[PullRequest]:
        """Fetch one page of closed pull requests against a base branch.

        Args:
            org: Organization name
            repo: Repository name
            base: Base branch the pull requests target
            page: Zero-based page index

        Returns:
            List of PullRequest objects, empty past the last page
        """
        repository = self.get_repository(org, repo)
        logger.debug("Fetching closed PRs for %s/%s page %d", org, repo, page)

        pulls = repository.get_pulls(state="closed", base=base)
        return [self._convert_pull_request(pr) for pr in pulls.get_page(page)]

    def get_issue_events(
        self, org: str, repo: str, issue_number: int
    ) -> list[IssueEvent]:
        """Get the issue events recorded for an issue or pull request."""
        repository = self.get_repository(org, repo)
        logger.debug("Fetching events for %s/%s#%d", org, repo, issue_number)

        github_issue = repository.get_issue(issue_number)
        return [self._convert_event(event) for event in github_issue.get_events()]

    def is_org_member(self, org: str, login: str) -> bool:
        """Check whether a user is a member of an organization."""
        if org not in self._organizations:
            self._organizations[org] = self.github.get_organization(org)
        logger.debug("Checking membership of %s in %s", login, org)

        return self._organizations[org].has_in_members(self.github.get_user(login))

    def add_assignees(
        self, org: str, repo: str, issue_number: int, assignees: list[str]
    ) -> None:
        """Add assignees to an issue or pull request.

        Raises:
            ValueError: If the issue is not found
            Exception: For other API errors
        """
        repository = self.get_repository(org, repo)
        try:
            github_issue = repository.get_issue(issue_number)
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {org}/{repo}")

        github_issue.add_to_assignees(*assignees)
        logger.debug("Assigned #%d to %s", issue_number, assignees)

    def add_labels(
        self, org: str, repo: str, issue_number: int, labels: list[str]
    ) -> None:
        """Add labels to an issue or pull request, keeping existing ones.

        Raises:
            ValueError: If the issue is not found
            Exception: For other API errors
        """
        repository = self.get_repository(org, repo)
        try:
            github_issue = repository.get_issue(issue_number)
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {org}/{repo}")

        github_issue.add_to_labels(*labels)
        logger.debug("Labeled #%d with %s", issue_number, labels)
