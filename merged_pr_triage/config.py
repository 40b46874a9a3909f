"""Configuration for the merged pull request triage run."""

import os
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TriageConfig(BaseModel):
    """Fixed settings for a triage run.

    These are not exposed on the command line; tests construct their own
    instances to exercise dry-run mode or alternate prefixes.
    """

    model_config = ConfigDict(frozen=True)

    organization: str = Field(
        "argoproj", description="Organization whose members own their own PRs"
    )
    oldest_pr: datetime = Field(
        datetime(2020, 6, 1, tzinfo=timezone.utc),
        description="Stop paging once a page ends with a PR created before this",
    )
    verify_label: str = Field(
        "needs-verification", description="Label added to every qualifying PR"
    )
    prefixes: tuple[str, ...] = Field(
        ("feat", "fix"), description="Title prefixes (before the colon) to consider"
    )
    dry_run: bool = Field(False, description="Compute decisions without writing")
    base_branch: str = Field("master", description="Base branch of listed PRs")
    per_page: int = Field(100, description="Pull requests fetched per page")


class Settings:
    """Credentials and target repository read from the environment."""

    def __init__(self) -> None:
        """Initialize settings from environment variables."""
        self.token: Optional[str] = os.getenv("GITHUB_TOKEN")
        self.repo: Optional[str] = os.getenv("GITHUB_REPO")

    def validate(self) -> None:
        """Validate settings and raise error if invalid."""
        if not self.token:
            raise ValueError("Please set GITHUB_TOKEN environment")

        if not self.repo or len(self.repo.strip("/").split("/")) != 2:
            raise ValueError("Please set GITHUB_REPO environment (i.e. yourorg/repo)")

    @property
    def org(self) -> str:
        """Organization part of GITHUB_REPO."""
        self.validate()
        assert self.repo is not None  # guaranteed by validate()
        return self.repo.strip("/").split("/")[0]

    @property
    def repo_name(self) -> str:
        """Repository part of GITHUB_REPO."""
        self.validate()
        assert self.repo is not None  # guaranteed by validate()
        return self.repo.strip("/").split("/")[1]
