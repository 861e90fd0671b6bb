"""Tests for search history models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from havadurumu.models.history import (
    HISTORY_LIMIT,
    SearchHistoryEntry,
    format_history_time,
    merge_history,
)


def entry(city: str, time: str = "01.01 00:00") -> SearchHistoryEntry:
    return SearchHistoryEntry(city=city, time=time)


class TestSearchHistoryEntry:
    """Tests for SearchHistoryEntry model."""

    def test_format_history_time(self):
        """Test the short day.month hour:minute format."""
        assert format_history_time(datetime(2026, 10, 19, 14, 5)) == "19.10 14:05"

    def test_create_stamps_time(self):
        """Test create formats the given moment."""
        created = SearchHistoryEntry.create("Paris", datetime(2026, 3, 7, 9, 30))
        assert created.city == "Paris"
        assert created.time == "07.03 09:30"

    def test_create_defaults_to_now(self):
        """Test create uses the current time when none is given."""
        created = SearchHistoryEntry.create("Paris")
        assert len(created.time) == len("07.03 09:30")

    def test_empty_city_rejected(self):
        """Test that an entry needs a city."""
        with pytest.raises(ValidationError):
            SearchHistoryEntry(city="", time="07.03 09:30")

    def test_entry_is_immutable(self):
        """Test entries cannot be modified after creation."""
        item = entry("Paris")
        with pytest.raises(ValidationError):
            item.city = "London"


class TestMergeHistory:
    """Tests for merge_history."""

    def test_new_city_goes_first(self):
        """Test the Paris then London scenario."""
        history = [entry("Paris", "t1")]
        merged = merge_history(history, entry("London", "t2"))
        assert merged == [entry("London", "t2"), entry("Paris", "t1")]

    def test_repeat_city_moves_to_front_once(self):
        """Test a repeated city appears exactly once, with the new time."""
        history = [entry("Paris", "t1"), entry("London", "t0")]
        merged = merge_history(history, entry("London", "t2"))
        assert merged == [entry("London", "t2"), entry("Paris", "t1")]

    def test_same_city_twice_in_a_row(self):
        """Test searching the front city again just refreshes its time."""
        history = [entry("Paris", "t1")]
        merged = merge_history(history, entry("Paris", "t2"))
        assert merged == [entry("Paris", "t2")]

    def test_truncates_to_limit(self):
        """Test the oldest entry falls off past the limit."""
        history = [entry(c) for c in ["E", "D", "C", "B", "A"]]
        merged = merge_history(history, entry("F"))
        assert [h.city for h in merged] == ["F", "E", "D", "C", "B"]
        assert len(merged) == HISTORY_LIMIT

    def test_custom_limit(self):
        """Test a smaller limit."""
        history = [entry("A"), entry("B")]
        merged = merge_history(history, entry("C"), limit=2)
        assert [h.city for h in merged] == ["C", "A"]

    def test_case_sensitive(self):
        """Test cities differing only in case are distinct."""
        merged = merge_history([entry("paris")], entry("Paris"))
        assert [h.city for h in merged] == ["Paris", "paris"]

    def test_does_not_mutate_input(self):
        """Test the input list is left alone."""
        history = [entry("Paris")]
        merge_history(history, entry("London"))
        assert history == [entry("Paris")]

    def test_invariants_over_many_searches(self):
        """Test length and uniqueness hold for any sequence of searches."""
        history: list[SearchHistoryEntry] = []
        cities = ["A", "B", "A", "C", "D", "E", "F", "B", "G", "A", "A", "H"]
        for i, city in enumerate(cities):
            history = merge_history(history, entry(city, str(i)))
            names = [h.city for h in history]
            assert len(history) <= HISTORY_LIMIT
            assert len(names) == len(set(names))
            assert history[0] == entry(city, str(i))
