"""Page-driven iteration over closed pull requests."""

from collections.abc import Callable, Iterator
from datetime import datetime

from ..github_client.models import PullRequest


def iter_pull_requests(
    fetch_page: Callable[[int], list[PullRequest]], oldest_pr: datetime
) -> Iterator[PullRequest]:
    """Yield pull requests page by page, in fetch order.

    A further page is requested only while the last pull request of the
    current page was created after ``oldest_pr``. Listings are newest first,
    so this bounds the walk on long-lived repositories.

    Args:
        fetch_page: Callable returning the pull requests of a zero-based page
        oldest_pr: Floor on creation time that ends the walk

    Yields:
        PullRequest objects; duplicates across shifting pages are not removed
    """
    page = 0
    while True:
        pulls = fetch_page(page)
        if not pulls:
            return

        yield from pulls

        if pulls[-1].created_at <= oldest_pr:
            return
        page += 1
