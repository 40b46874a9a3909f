"""Orchestration of a triage run over a repository's merged pull requests."""

from datetime import datetime

from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import TriageConfig
from ..github_client.client import GitHubClient
from ..github_client.models import PullRequest
from .pagination import iter_pull_requests
from .policy import (
    AssigneeDecision,
    decide_assignee,
    describe_decision,
    find_merger,
    qualifies,
)

console = Console()
err_console = Console(stderr=True)


class RunStatistics(BaseModel):
    """Counters accumulated over one run."""

    authors: dict[str, int] = Field(
        default_factory=dict, description="Qualifying PRs per author login"
    )
    assignees: dict[str, int] = Field(
        default_factory=dict, description="PRs assigned per login during this run"
    )

    def record_author(self, login: str) -> None:
        self.authors[login] = self.authors.get(login, 0) + 1

    def record_assignee(self, login: str) -> None:
        self.assignees[login] = self.assignees.get(login, 0) + 1


class OrgMembershipResolver:
    """Organization membership lookups, cached per login for one run."""

    def __init__(self, client: GitHubClient, organization: str) -> None:
        self.client = client
        self.organization = organization
        self._cache: dict[str, bool] = {}

    def is_member(self, login: str) -> bool:
        if login not in self._cache:
            self._cache[login] = self.client.is_org_member(self.organization, login)
        return self._cache[login]


class TriageRunner:
    """Assign and label merged pull requests that need verification."""

    def __init__(
        self,
        client: GitHubClient,
        org: str,
        repo: str,
        config: TriageConfig | None = None,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            client: GitHub client used for reads and mutations
            org: Owner of the target repository
            repo: Name of the target repository
            config: Fixed triage settings, defaults when None
            out: Console for progress output
            err: Console for error output
        """
        self.client = client
        self.org = org
        self.repo = repo
        self.config = config or TriageConfig()
        self.out = out or console
        self.err = err or err_console
        self.membership = OrgMembershipResolver(client, self.config.organization)
        self.stats = RunStatistics()

    def _fetch_page(self, page: int) -> list[PullRequest]:
        return self.client.list_closed_pull_requests(
            self.org, self.repo, self.config.base_branch, page
        )

    def _say(self, message: str) -> None:
        self.out.print(escape(message), soft_wrap=True)

    def _warn(self, message: str) -> None:
        self.err.print(escape(message), soft_wrap=True)

    def run(self, since: datetime) -> RunStatistics:
        """Process every closed pull request merged after ``since``.

        Read errors from the listing, event or membership lookups propagate.
        Failed writes are reported and skipped.
        """
        self._say(f"Processing PRs since {since.isoformat()}")

        for pr in iter_pull_requests(self._fetch_page, self.config.oldest_pr):
            if qualifies(pr, since, self.config):
                self.process(pr)

        self.print_summary()
        return self.stats

    def process(self, pr: PullRequest) -> AssigneeDecision:
        """Decide and apply the assignee and label for a qualifying PR."""
        author_in_org = self.membership.is_member(pr.author)
        self.stats.record_author(pr.author)

        events = self.client.get_issue_events(self.org, self.repo, pr.number)
        decision = decide_assignee(pr.author, find_merger(events), author_in_org)
        self._say(describe_decision(pr, decision, self.config.organization))

        self.apply_assignee(pr, decision)
        self.apply_label(pr)
        return decision

    def apply_assignee(self, pr: PullRequest, decision: AssigneeDecision) -> None:
        """Assign the PR unless it already has an assignee."""
        if pr.assignees:
            self._say(
                f"Skipping assignee for PR {pr.number}, "
                "because it has already been assigned."
            )
            return
        if decision.assignee is None:
            self._say(
                f"Skipping assignee for PR {pr.number}, because no merger was found."
            )
            return

        if not self.config.dry_run:
            try:
                self.client.add_assignees(
                    self.org, self.repo, pr.number, [decision.assignee]
                )
            except Exception as e:
                self._warn(f"Error adding assignee to PR {pr.number}: {e}")
        self.stats.record_assignee(decision.assignee)

    def apply_label(self, pr: PullRequest) -> None:
        """Add the verification label unless it is already present."""
        if self.config.verify_label in pr.label_names:
            self._say(
                f"Skipping label for PR {pr.number}, because it is already labeled"
            )
            return

        if not self.config.dry_run:
            try:
                self.client.add_labels(
                    self.org, self.repo, pr.number, [self.config.verify_label]
                )
            except Exception as e:
                self._warn(f"Error adding label to PR {pr.number}: {e}")

    def print_summary(self) -> None:
        """Print the per-author and per-assignee counts."""
        for title, counts in (
            ("PR authors", self.stats.authors),
            ("Assignees", self.stats.assignees),
        ):
            table = Table(title=title)
            table.add_column("Login", style="cyan")
            table.add_column("Count", style="green", justify="right")
            for login, count in sorted(counts.items(), key=lambda kv: -kv[1]):
                table.add_row(login, str(count))
            self.out.print(table)
