"""Tests for page-driven pull request iteration."""

from datetime import datetime, timezone
from unittest.mock import Mock

from merged_pr_triage.triage.pagination import iter_pull_requests

FLOOR = datetime(2020, 6, 1, tzinfo=timezone.utc)


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


class TestIterPullRequests:
    """Test pagination continuation and termination."""

    def test_stops_when_last_pr_predates_floor(self, make_pr) -> None:
        pages = [
            [make_pr(number=3, created_at=_day(2024, 1, 1))],
            [
                make_pr(number=2, created_at=_day(2021, 1, 1)),
                make_pr(number=1, created_at=_day(2019, 1, 1)),
            ],
            [make_pr(number=0, created_at=_day(2018, 1, 1))],
        ]
        fetch_page = Mock(side_effect=lambda page: pages[page])

        numbers = [pr.number for pr in iter_pull_requests(fetch_page, FLOOR)]

        assert numbers == [3, 2, 1]
        assert [c.args[0] for c in fetch_page.call_args_list] == [0, 1]

    def test_last_pr_created_on_floor_stops(self, make_pr) -> None:
        fetch_page = Mock(return_value=[make_pr(created_at=FLOOR)])

        assert len(list(iter_pull_requests(fetch_page, FLOOR))) == 1
        fetch_page.assert_called_once_with(0)

    def test_stops_on_empty_page(self, make_pr) -> None:
        pages = [[make_pr(number=1, created_at=_day(2024, 1, 1))], []]
        fetch_page = Mock(side_effect=lambda page: pages[page])

        numbers = [pr.number for pr in iter_pull_requests(fetch_page, FLOOR)]

        assert numbers == [1]
        assert fetch_page.call_count == 2

    def test_only_last_pr_decides_continuation(self, make_pr) -> None:
        """An old PR in the middle of a page does not stop the walk."""
        pages = [
            [
                make_pr(number=2, created_at=_day(2019, 1, 1)),
                make_pr(number=1, created_at=_day(2024, 1, 1)),
            ],
            [],
        ]
        fetch_page = Mock(side_effect=lambda page: pages[page])

        list(iter_pull_requests(fetch_page, FLOOR))

        assert fetch_page.call_count == 2

    def test_is_lazy(self, make_pr) -> None:
        fetch_page = Mock(return_value=[make_pr(created_at=_day(2024, 1, 1))])

        iterator = iter_pull_requests(fetch_page, FLOOR)
        fetch_page.assert_not_called()

        next(iterator)
        fetch_page.assert_called_once_with(0)

    def test_duplicates_are_kept(self, make_pr) -> None:
        """A PR shifted across a page boundary is yielded twice."""
        pr = make_pr(number=7, created_at=_day(2024, 1, 1))
        old = make_pr(number=6, created_at=_day(2019, 1, 1))
        pages = [[pr], [pr, old]]
        fetch_page = Mock(side_effect=lambda page: pages[page])

        numbers = [p.number for p in iter_pull_requests(fetch_page, FLOOR)]

        assert numbers == [7, 7, 6]
