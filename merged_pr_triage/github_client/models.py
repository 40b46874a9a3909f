"""Pydantic models for GitHub data structures.

These models map directly to GitHub's REST API v3 response structures.
API Reference: https://docs.github.com/en/rest/pulls
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        ..., description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class PullRequest(BaseModel):
    """GitHub pull request model, reduced to what triage needs.

    Maps to GitHub REST API Pull Request object.
    API Reference: https://docs.github.com/en/rest/pulls/pulls
    """

    number: int = Field(..., description="Pull request number within the repository")
    title: str = Field(..., description="Title of the pull request (string)")
    user: GitHubUser = Field(..., description="Author of the pull request")
    created_at: datetime = Field(
        ..., description="Timestamp of pull request creation (ISO 8601)"
    )
    merged_at: datetime | None = Field(
        None, description="Timestamp of the merge, null if never merged (ISO 8601)"
    )
    assignees: list[GitHubUser] = Field(
        default_factory=list, description="Users currently assigned"
    )
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Labels currently attached"
    )

    @property
    def author(self) -> str:
        """Login of the pull request author."""
        return self.user.login

    @property
    def label_names(self) -> set[str]:
        """Names of the labels currently attached."""
        return {label.name for label in self.labels}


class IssueEvent(BaseModel):
    """GitHub issue event model, as listed on an issue or pull request timeline.

    Maps to GitHub REST API Issue Event object.
    API Reference: https://docs.github.com/en/rest/issues/events
    """

    event: str = Field(..., description="Event kind, e.g. 'merged', 'labeled'")
    actor: str | None = Field(
        None, description="Login of the account that triggered the event"
    )
