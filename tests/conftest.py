"""Test configuration and fixtures."""

import io
from collections.abc import Callable
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from merged_pr_triage.github_client.models import (
    GitHubLabel,
    GitHubUser,
    PullRequest,
)


def utc(*args: int) -> datetime:
    """Build a UTC datetime."""
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def make_pr() -> Callable[..., PullRequest]:
    """Factory for PullRequest models with sensible defaults."""

    def _make_pr(
        number: int = 1,
        title: str = "feat: something",
        author: str = "alice",
        created_at: datetime | None = None,
        merged_at: datetime | None = utc(2024, 2, 1),
        assignees: list[str] | None = None,
        labels: list[str] | None = None,
    ) -> PullRequest:
        return PullRequest(
            number=number,
            title=title,
            user=GitHubUser(login=author, id=number),
            created_at=created_at or utc(2024, 1, 15),
            merged_at=merged_at,
            assignees=[
                GitHubUser(login=login, id=i) for i, login in enumerate(assignees or [])
            ],
            labels=[GitHubLabel(name=name, color="ededed") for name in labels or []],
        )

    return _make_pr


@pytest.fixture
def mock_client() -> MagicMock:
    """GitHub client double with an empty repository."""
    client = MagicMock()
    client.list_closed_pull_requests.return_value = []
    client.get_issue_events.return_value = []
    client.is_org_member.return_value = False
    return client


@pytest.fixture
def out_console() -> Console:
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def err_console() -> Console:
    """Console writing errors to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200)
