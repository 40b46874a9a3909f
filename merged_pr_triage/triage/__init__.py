"""Pull request triage: decision policy, pagination and orchestration."""

from .pagination import iter_pull_requests
from .policy import (
    AssigneeDecision,
    AssignReason,
    decide_assignee,
    find_merger,
    merged_since,
    needs_verification,
    qualifies,
)
from .runner import OrgMembershipResolver, RunStatistics, TriageRunner

__all__ = [
    "AssigneeDecision",
    "AssignReason",
    "OrgMembershipResolver",
    "RunStatistics",
    "TriageRunner",
    "decide_assignee",
    "find_merger",
    "iter_pull_requests",
    "merged_since",
    "needs_verification",
    "qualifies",
]
