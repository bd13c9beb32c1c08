"""
tests/test_intervals.py — Unit tests for the producer interval calculator.

Tests the pure computation module (awards.intervals) directly:
grouping, pairing, min/max selection, and the end-to-end calculate()
contract on hand-built winner lists.

Requires: pytest, pydantic
"""

from __future__ import annotations

import pytest

from awards.intervals import (
    calculate,
    compute_intervals,
    group_wins_by_producer,
    select_extremes,
)
from awards.models import IntervalResult, Movie, MovieWinRecord, ProducerInterval


def _win(producers: str, year: int) -> MovieWinRecord:
    return MovieWinRecord(year=year, producers=producers)


def _pairs(intervals: list[ProducerInterval]) -> list[tuple[str, int, int, int]]:
    return [
        (i.producer, i.interval, i.previous_win, i.following_win)
        for i in intervals
    ]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def basic_winners() -> list[MovieWinRecord]:
    """A wins 2000, 2002, 2010 (gaps 2, 8); B wins 1990, 1991 (gap 1)."""
    return [
        _win("A", 2010),
        _win("B", 1990),
        _win("A", 2000),
        _win("B", 1991),
        _win("A", 2002),
    ]


# ===========================================================================
# Grouping
# ===========================================================================


class TestGroupWinsByProducer:
    def test_years_sorted_ascending(self, basic_winners):
        wins = group_wins_by_producer(basic_winners)
        assert wins == {"A": [2000, 2002, 2010], "B": [1990, 1991]}

    def test_first_appearance_order(self, basic_winners):
        wins = group_wins_by_producer(basic_winners)
        assert list(wins) == ["A", "B"]

    def test_multi_producer_movie(self):
        wins = group_wins_by_producer([
            _win("Producer X and Producer Y, Producer Z", 1999),
        ])
        assert wins == {
            "Producer X": [1999],
            "Producer Y": [1999],
            "Producer Z": [1999],
        }

    def test_case_sensitive_names(self):
        wins = group_wins_by_producer([
            _win("Joel Silver", 1990),
            _win("joel silver", 1991),
            _win("  Joel Silver ", 1995),
        ])
        assert wins == {"Joel Silver": [1990, 1995], "joel silver": [1991]}

    def test_duplicate_years_kept_by_default(self):
        wins = group_wins_by_producer([_win("John Doe, John Doe", 2001)])
        assert wins == {"John Doe": [2001, 2001]}

    def test_unique_years_collapses_duplicates(self):
        wins = group_wins_by_producer(
            [_win("John Doe, John Doe", 2001), _win("John Doe", 2001)],
            unique_years=True,
        )
        assert wins == {"John Doe": [2001]}

    def test_blank_producers_ignored(self):
        assert group_wins_by_producer([_win("  ", 2001), _win(", ,", 2002)]) == {}

    def test_input_not_mutated(self, basic_winners):
        snapshot = list(basic_winners)
        group_wins_by_producer(basic_winners)
        assert basic_winners == snapshot


# ===========================================================================
# Pairing
# ===========================================================================


class TestComputeIntervals:
    def test_adjacent_pairs_only(self):
        intervals = compute_intervals({"A": [2000, 2002, 2010]})
        assert _pairs(intervals) == [
            ("A", 2, 2000, 2002),
            ("A", 8, 2002, 2010),
        ]

    def test_single_win_contributes_nothing(self):
        assert compute_intervals({"A": [2000], "B": []}) == []

    def test_producer_then_chronological_order(self):
        intervals = compute_intervals({"B": [1990, 1991], "A": [2000, 2005]})
        assert [i.producer for i in intervals] == ["B", "A"]


# ===========================================================================
# Extremes
# ===========================================================================


class TestSelectExtremes:
    def test_empty(self):
        assert select_extremes([]) == IntervalResult(min=[], max=[])

    def test_single_interval_in_both_lists(self):
        only = ProducerInterval.between("A", 2000, 2004)
        result = select_extremes([only])
        assert result.min == [only]
        assert result.max == [only]

    def test_ties_all_included_in_generation_order(self):
        items = [
            ProducerInterval.between("A", 2000, 2001),
            ProducerInterval.between("B", 1990, 2000),
            ProducerInterval.between("C", 1980, 1981),
            ProducerInterval.between("D", 1970, 1980),
        ]
        result = select_extremes(items)
        assert [i.producer for i in result.min] == ["A", "C"]
        assert [i.producer for i in result.max] == ["B", "D"]


# ===========================================================================
# calculate() — end-to-end contract
# ===========================================================================


class TestCalculate:
    def test_empty_input(self):
        result = calculate([])
        assert result.min == []
        assert result.max == []
        assert result.is_empty

    def test_single_win_per_producer(self):
        result = calculate([_win("A", 2000), _win("B", 2005)])
        assert result == IntervalResult(min=[], max=[])

    def test_basic_min_max(self, basic_winners):
        result = calculate(basic_winners)
        assert result.to_dict() == {
            "min": [{"producer": "B", "interval": 1, "previousWin": 1990, "followingWin": 1991}],
            "max": [{"producer": "A", "interval": 8, "previousWin": 2002, "followingWin": 2010}],
        }

    def test_tie_on_minimum(self):
        result = calculate([
            _win("A", 2000), _win("A", 2001),
            _win("B", 1990), _win("B", 1991),
            _win("C", 1970), _win("C", 1980),
        ])
        assert _pairs(result.min) == [("A", 1, 2000, 2001), ("B", 1, 1990, 1991)]
        assert _pairs(result.max) == [("C", 10, 1970, 1980)]

    def test_multi_producer_movie_feeds_each_producer(self):
        result = calculate([
            _win("Producer X and Producer Y, Producer Z", 2000),
            _win("Producer X", 2003),
            _win("Producer Y & Producer Z", 2010),
        ])
        assert _pairs(result.min) == [("Producer X", 3, 2000, 2003)]
        assert _pairs(result.max) == [
            ("Producer Y", 10, 2000, 2010),
            ("Producer Z", 10, 2000, 2010),
        ]

    def test_min_equals_max(self):
        result = calculate([
            _win("A", 2000), _win("A", 2005),
            _win("B", 1990), _win("B", 1995),
        ])
        assert result.min == result.max
        assert _pairs(result.min) == [("A", 5, 2000, 2005), ("B", 5, 1990, 1995)]

    def test_equal_gaps_single_producer(self):
        result = calculate([_win("A", 2000), _win("A", 2001), _win("A", 2002)])
        assert _pairs(result.min) == [("A", 1, 2000, 2001), ("A", 1, 2001, 2002)]
        assert result.max == result.min

    def test_deterministic(self, basic_winners):
        assert calculate(basic_winners) == calculate(basic_winners)

    def test_intervals_never_negative(self, basic_winners):
        result = calculate(basic_winners + [_win("A", 1950), _win("B", 2020)])
        for item in result.min + result.max:
            assert item.interval >= 0
            assert item.following_win >= item.previous_win

    def test_duplicate_listing_yields_zero_interval(self):
        result = calculate([_win("John Doe, John Doe", 2001), _win("John Doe", 2009)])
        assert _pairs(result.min) == [("John Doe", 0, 2001, 2001)]
        assert _pairs(result.max) == [("John Doe", 8, 2001, 2009)]

    def test_unique_years_drops_zero_interval(self):
        result = calculate(
            [_win("John Doe, John Doe", 2001), _win("John Doe", 2009)],
            unique_years=True,
        )
        assert _pairs(result.min) == [("John Doe", 8, 2001, 2009)]
        assert result.max == result.min

    def test_accepts_full_movies_and_ignores_winner_flag(self):
        movies = [
            Movie(year=1984, title="Bolero", studios="Cannon Films", producers="Bo Derek", winner=True),
            Movie(year=1990, title="Ghosts Can't Do It", studios="Triumph Releasing", producers="Bo Derek"),
        ]
        result = calculate(movies)
        assert _pairs(result.max) == [("Bo Derek", 6, 1984, 1990)]

    def test_accepts_generator(self, basic_winners):
        result = calculate(movie for movie in basic_winners)
        assert _pairs(result.min) == [("B", 1, 1990, 1991)]
