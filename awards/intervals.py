"""
awards.intervals — Producer Interval Calculator.

Pure-computation module. Zero I/O. Zero global state. Zero randomness.
All functions are deterministic and never mutate their inputs.

Given the winning movies, finds for every producer the gaps (in years)
between consecutive wins, then keeps the gaps equal to the global
minimum and the global maximum:

    group_wins_by_producer()  → {producer: [year, ...]}  (sorted ascending)
    compute_intervals()       → [ProducerInterval, ...]  (adjacent pairs)
    select_extremes()         → IntervalResult(min=[...], max=[...])

calculate() chains the three steps and is the entry point callers use.

Ordering: producers in order of first appearance in the input, then
chronologically within a producer. Ties are never broken; every interval
matching the extreme value is returned.
"""

from __future__ import annotations

from collections.abc import Iterable

from awards.models import IntervalResult, MovieWinRecord, ProducerInterval
from awards.producers import parse_producers


def group_wins_by_producer(
    winning_movies: Iterable[MovieWinRecord],
    unique_years: bool = False,
) -> dict[str, list[int]]:
    """Map each producer name to its ascending list of win years.

    Args:
        winning_movies: Records already filtered to winners.
        unique_years: Collapse repeated (producer, year) pairs. Off by
            default, so a producer listed twice on one movie yields a
            zero-year interval.
    """
    producer_wins: dict[str, list[int]] = {}

    for movie in winning_movies:
        for name in parse_producers(movie.producers):
            producer_wins.setdefault(name, []).append(movie.year)

    for name, years in producer_wins.items():
        if unique_years:
            years = list(dict.fromkeys(years))
        producer_wins[name] = sorted(years)

    return producer_wins


def compute_intervals(producer_wins: dict[str, list[int]]) -> list[ProducerInterval]:
    """One interval per adjacent pair of win years. Years must be sorted."""
    intervals: list[ProducerInterval] = []

    for producer, years in producer_wins.items():
        if len(years) < 2:
            continue
        for previous_win, following_win in zip(years, years[1:]):
            intervals.append(
                ProducerInterval.between(producer, previous_win, following_win)
            )

    return intervals


def select_extremes(intervals: list[ProducerInterval]) -> IntervalResult:
    """Keep every interval equal to the smallest and to the largest value.

    Both lists are empty when there are no intervals. When the smallest
    and largest values coincide, the same intervals appear in both lists.
    """
    if not intervals:
        return IntervalResult(min=[], max=[])

    lowest = min(item.interval for item in intervals)
    highest = max(item.interval for item in intervals)

    return IntervalResult(
        min=[item for item in intervals if item.interval == lowest],
        max=[item for item in intervals if item.interval == highest],
    )


def calculate(
    winning_movies: Iterable[MovieWinRecord],
    unique_years: bool = False,
) -> IntervalResult:
    """Compute the min/max producer intervals for a set of winning movies.

    The caller filters to winners; this function does not look at any
    winner flag. Never raises for well-typed input. An empty input, or
    one where no producer won twice, gives empty min and max lists.
    """
    producer_wins = group_wins_by_producer(winning_movies, unique_years=unique_years)
    return select_extremes(compute_intervals(producer_wins))
