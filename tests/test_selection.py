"""
Unit tests for runner selection.
"""

from models import Row
from selection import ALL_RUNNERS, distinct_persons, filter_rows, runner_options


class TestFilterRows:
    """Narrowing to one runner."""

    def test_all_is_identity(self, sample_rows):
        assert filter_rows(sample_rows, ALL_RUNNERS) is sample_rows
        assert filter_rows(sample_rows) == sample_rows

    def test_single_person_keeps_order(self, sample_rows):
        rows = filter_rows(sample_rows, "Bob")
        assert rows == (sample_rows[1], sample_rows[2])
        assert all(row.person == "Bob" for row in rows)

    def test_unknown_person_is_empty(self, sample_rows):
        assert filter_rows(sample_rows, "Carol") == ()

    def test_does_not_touch_input(self, sample_rows):
        before = tuple(sample_rows)
        filter_rows(sample_rows, "Alice")
        assert sample_rows == before

    def test_person_named_like_sentinel_only_when_exact(self):
        rows = (Row("2024-01-01", "All", 1.0), Row("2024-01-01", "Bob", 2.0))
        assert filter_rows(rows, "All") == (rows[0],)


class TestDistinctPersons:
    """Selector contents."""

    def test_first_seen_order(self, sample_rows):
        assert distinct_persons(sample_rows) == ["Alice", "Bob"]

    def test_empty(self):
        assert distinct_persons(()) == []
        assert runner_options(()) == [ALL_RUNNERS]

    def test_options_lead_with_all(self, sample_rows):
        assert runner_options(sample_rows) == [ALL_RUNNERS, "Alice", "Bob"]
