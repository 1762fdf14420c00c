"""Tests for card formatting helpers."""

from datetime import datetime, timedelta

import pytest

from src.app.services.formatting import (
    compact_tags,
    display_status,
    summarize,
    time_remaining,
)

pytestmark = pytest.mark.unit

NOW = datetime(2025, 1, 1, 12, 0, 0)


class TestSummarize:
    def test_truncates(self):
        assert summarize("x" * 200) == "x" * 150

    def test_custom_length(self):
        assert summarize("abcdef", 3) == "abc"

    def test_empty(self):
        assert summarize(None) == ""
        assert summarize("") == ""

    def test_ellipsis_when_cut(self):
        assert summarize("x" * 200, ellipsis=True) == "x" * 150 + "..."

    def test_no_ellipsis_when_short(self):
        assert summarize("short", ellipsis=True) == "short"


class TestCompactTags:
    def test_three_or_fewer_unchanged(self):
        assert compact_tags(["a", "b", "c"]) == ["a", "b", "c"]

    def test_four_collapsed(self):
        assert compact_tags(["a", "b", "c", "d"]) == ["a", "b", "c", "+1"]

    def test_more_collapsed(self):
        assert compact_tags(["a", "b", "c", "d", "e", "f"]) == ["a", "b", "c", "+3"]

    def test_none(self):
        assert compact_tags(None) == []


class TestTimeRemaining:
    def test_no_deadline(self):
        assert time_remaining(None, NOW) is None

    def test_past_deadline(self):
        assert time_remaining(NOW - timedelta(days=1), NOW) is None

    def test_days(self):
        assert time_remaining(NOW + timedelta(days=5, hours=3), NOW) == "P5D"

    def test_months(self):
        assert time_remaining(NOW + timedelta(days=65), NOW) == "P2M"

    def test_less_than_a_day(self):
        assert time_remaining(NOW + timedelta(hours=3), NOW) is None


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("draft", "ARCHIVED"),
        ("published", "ACTIVE"),
        ("in_progress", "FILLED"),
        ("completed", "ARCHIVED"),
        ("cancelled", "ARCHIVED"),
        ("something-else", "ACTIVE"),
    ],
)
def test_display_status(status, expected):
    assert display_status(status) == expected
