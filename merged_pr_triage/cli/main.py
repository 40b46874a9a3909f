"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..config import Settings, TriageConfig
from ..github_client.client import GitHubClient
from ..triage.runner import TriageRunner
from ..utils.date_parser import parse_date_input

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="merged-pr-triage",
    help="Assign and label recently merged pull requests for verification",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)


@app.command()
def main(
    since: list[str] | None = typer.Argument(
        None,
        help="Only PRs merged after this time, e.g. 2024-01-01 or 2024-01-01T10:00:00Z",
        show_default=False,
    ),
) -> None:
    """Assign merged feat:/fix: pull requests and label them for verification.

    The assignee is the author when they merged the PR themselves or are a
    member of the organization, otherwise the merger. PRs that already have
    an assignee or the label are left alone.

    Requires GITHUB_TOKEN and GITHUB_REPO (yourorg/repo) in the environment.

    Examples:
        merged-pr-triage 2024-01-01
        merged-pr-triage 2024-01-01T10:00:00Z
    """
    settings = Settings()
    try:
        settings.validate()
    except ValueError as e:
        err_console.print(str(e), markup=False)
        raise typer.Exit(1)

    if not since or len(since) != 1:
        err_console.print("Usage: merged-pr-triage <since>", markup=False)
        raise typer.Exit(1)

    try:
        since_dt = parse_date_input(since[0])
    except ValueError as e:
        err_console.print(f"Invalid time specified: {e}", markup=False)
        raise typer.Exit(1)

    config = TriageConfig()
    client = GitHubClient(token=settings.token, per_page=config.per_page)
    runner = TriageRunner(client, settings.org, settings.repo_name, config=config)
    runner.run(since_dt)


if __name__ == "__main__":
    app()
