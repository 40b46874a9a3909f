"""Decision logic for merged pull request triage.

Everything here is free of side effects so it can be tested without a
GitHub connection.
"""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from ..config import TriageConfig
from ..github_client.models import IssueEvent, PullRequest


class AssignReason(str, Enum):
    """Why a pull request was assigned to a given user."""

    AUTHOR_IS_MERGER = "author_is_merger"
    AUTHOR_IN_ORG = "author_in_org"
    MERGER_FALLBACK = "merger_fallback"


class AssigneeDecision(BaseModel):
    """Outcome of the assignee policy for one pull request."""

    assignee: str | None = Field(
        ..., description="Login to assign, None when the merger is unknown"
    )
    reason: AssignReason = Field(..., description="Which rule picked the assignee")


def needs_verification(title: str, prefixes: Iterable[str]) -> bool:
    """Check whether a title starts with one of the prefixes followed by a colon."""
    lowered = title.lower()
    return any(lowered.startswith(f"{prefix}:") for prefix in prefixes)


def merged_since(pr: PullRequest, since: datetime) -> bool:
    """Check whether the pull request was merged strictly after ``since``."""
    return pr.merged_at is not None and pr.merged_at > since


def qualifies(pr: PullRequest, since: datetime, config: TriageConfig) -> bool:
    """Check whether a pull request should be triaged in this run."""
    return merged_since(pr, since) and needs_verification(pr.title, config.prefixes)


def find_merger(events: Iterable[IssueEvent]) -> str | None:
    """Return the login that merged the pull request, if a merge event exists."""
    for event in events:
        if event.event == "merged":
            return event.actor
    return None


def decide_assignee(
    author: str, merger: str | None, author_in_org: bool
) -> AssigneeDecision:
    """Pick who owns verification of a merged pull request.

    The author owns it when they merged it themselves or belong to the
    organization; otherwise the merger does. An unknown merger never matches
    the author, so the decision then rests on membership alone and may come
    back without an assignee.

    Args:
        author: Login of the pull request author
        merger: Login of the account that merged it, None if not found
        author_in_org: Whether the author is an organization member

    Returns:
        AssigneeDecision with the chosen login and the rule that chose it
    """
    if merger is not None and merger == author:
        return AssigneeDecision(assignee=author, reason=AssignReason.AUTHOR_IS_MERGER)
    if author_in_org:
        return AssigneeDecision(assignee=author, reason=AssignReason.AUTHOR_IN_ORG)
    return AssigneeDecision(assignee=merger, reason=AssignReason.MERGER_FALLBACK)


def describe_decision(
    pr: PullRequest, decision: AssigneeDecision, organization: str
) -> str:
    """Render the progress line narrating a decision."""
    merged_at = pr.merged_at.isoformat() if pr.merged_at else "-"
    head = (
        f"Assign PR {pr.number} ({pr.created_at.isoformat()}/{merged_at} "
        f"'{pr.title}')"
    )

    if decision.reason is AssignReason.AUTHOR_IS_MERGER:
        return f"{head} to OWNER {decision.assignee} because author is merger"
    if decision.reason is AssignReason.AUTHOR_IN_ORG:
        return (
            f"{head} to OWNER {decision.assignee} because they are in "
            f"{organization} org"
        )
    merger = decision.assignee or "<unknown>"
    return (
        f"{head} to MERGER {merger} because author {pr.author} is not in "
        f"{organization} org"
    )
