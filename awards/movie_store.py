"""
awards.movie_store — Movie list reader and thread-safe in-memory store.

Reads the Golden Raspberry movie list, a delimiter-separated file with a
header row:

    id;year;title;studios;producers;winner
    1;1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes

The ``id`` column is optional. Column order does not matter; columns are
looked up by header name.

Design contract:
    - read_movies_csv() is the ONLY function that parses the movie list.
    - A missing file, a non-UTF-8 file, a separator that is not one
      character, or a header without the required columns is a
      structured error. A bad data row is logged and skipped; it never
      aborts the load.
    - MovieStore replaces its contents atomically and only hands out
      copies, so readers never see a half-loaded list.
"""

from __future__ import annotations

import csv
import json
import logging
import os
import re
import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from awards.constants import (
    DEFAULT_CSV_SEPARATOR,
    DEFAULT_WINNER_YES,
    MAX_YEAR,
    MIN_YEAR,
    REQUIRED_COLUMNS,
    TEXT_COLUMNS,
)
from awards.intervals import calculate
from awards.models import IntervalResult, Movie

logger = logging.getLogger("awards.store")

# ASCII digits with an optional minus; rejects "+", "_" and non-ASCII digits
_INTEGER_RE = re.compile(r"-?[0-9]+")

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

CSV_SEPARATOR: str = os.getenv("CSV_SEPARATOR", DEFAULT_CSV_SEPARATOR) or DEFAULT_CSV_SEPARATOR
"""Column delimiter of the movie list. Controlled by CSV_SEPARATOR env var."""

CSV_WINNER_YES: str = os.getenv("CSV_WINNER_YES", DEFAULT_WINNER_YES).strip() or DEFAULT_WINNER_YES
"""Winner column token meaning "won". Controlled by CSV_WINNER_YES env var."""


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class MovieDataError(Exception):
    """Raised when the movie list cannot be used as a whole."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(detail)


class MovieDataNotFoundError(MovieDataError):
    """Raised when the movie list file does not exist."""


class _RowError(ValueError):
    """A single data row is unusable. Internal: rows are skipped, not raised."""


# ---------------------------------------------------------------------------
# Row parsing
# ---------------------------------------------------------------------------


def _parse_year(raw: str | None) -> int:
    value = (raw or "").strip()
    if not value:
        raise _RowError("year cannot be empty")
    if not _INTEGER_RE.fullmatch(value):
        raise _RowError(f"invalid year format: {value!r}")
    year = int(value)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise _RowError(f"year out of valid range ({MIN_YEAR}-{MAX_YEAR}): {year}")
    return year


def _parse_id(raw: str | None) -> int | None:
    value = (raw or "").strip()
    if not value:
        return None
    if not _INTEGER_RE.fullmatch(value):
        raise _RowError(f"invalid id format: {value!r}")
    movie_id = int(value)
    if movie_id <= 0:
        raise _RowError(f"id must be positive: {movie_id}")
    return movie_id


def _parse_row(row: dict[str, Any], winner_yes: str) -> Movie:
    """Turn one DictReader row into a Movie. Raises _RowError."""
    if None in row:
        # DictReader files surplus cells under the None key
        raise _RowError("more columns than the header")
    missing = [col for col in REQUIRED_COLUMNS if row.get(col) is None]
    if missing:
        raise _RowError(f"missing columns: {missing}")

    text: dict[str, str] = {}
    for col in TEXT_COLUMNS:
        value = row[col].strip()
        if not value:
            raise _RowError(f"{col} cannot be blank")
        text[col] = value

    try:
        return Movie(
            id=_parse_id(row.get("id")),
            year=_parse_year(row["year"]),
            winner=row["winner"].strip().lower() == winner_yes.lower(),
            **text,
        )
    except ValidationError as exc:
        raise _RowError(str(exc))


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def _read_rows(fh, path: Path, separator: str, winner_yes: str) -> tuple[list[Movie], int]:
    """Parse an open movie list. Returns (movies, skipped row count)."""
    movies: list[Movie] = []
    skipped = 0

    reader = csv.DictReader(fh, delimiter=separator)
    if reader.fieldnames is None:
        return movies, skipped

    header = [name.strip().lower() for name in reader.fieldnames]
    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise MovieDataError(
            path,
            f"Movie list header is missing columns {missing}: {path}",
        )
    reader.fieldnames = header

    for row in reader:
        try:
            movies.append(_parse_row(row, winner_yes))
        except _RowError as exc:
            skipped += 1
            logger.warning(json.dumps({
                "event": "row_skipped",
                "path": str(path),
                "line": reader.line_num,
                "reason": str(exc),
            }))

    return movies, skipped


def read_movies_csv(
    path: Path | str,
    separator: str | None = None,
    winner_yes: str | None = None,
) -> list[Movie]:
    """Read every valid movie from a movie list file, in file order.

    Args:
        path: Movie list location.
        separator: Single-character column delimiter. Defaults to CSV_SEPARATOR.
        winner_yes: Winner token. Defaults to CSV_WINNER_YES.

    Returns:
        Parsed movies. Rows that fail validation are skipped with a
        WARNING log line carrying the 1-based line number.

    Raises:
        MovieDataNotFoundError: if the file does not exist.
        MovieDataError: if the separator is not one character, the file
            is not UTF-8, or the header lacks a required column.
    """
    path = Path(path)
    separator = separator or CSV_SEPARATOR
    winner_yes = winner_yes or CSV_WINNER_YES

    if len(separator) != 1:
        raise MovieDataError(
            path,
            f"Column separator must be a single character, got {separator!r}.",
        )

    if not path.is_file():
        raise MovieDataNotFoundError(path, f"Movie list not found: {path}")

    try:
        with open(path, encoding="utf-8-sig", newline="") as fh:
            movies, skipped = _read_rows(fh, path, separator, winner_yes)
    except UnicodeDecodeError as exc:
        raise MovieDataError(
            path,
            f"Movie list is not valid UTF-8 (byte offset {exc.start}): {path}",
        )

    logger.info(json.dumps({
        "event": "movies_loaded",
        "path": str(path),
        "movies": len(movies),
        "skipped": skipped,
    }))
    return movies


# ---------------------------------------------------------------------------
# MovieStore
# ---------------------------------------------------------------------------


class MovieStore:
    """Thread-safe in-memory movie list.

    Usage::

        store = MovieStore.from_csv("data/movielist.csv")
        result = store.producer_intervals()
        result.to_dict()  # {"min": [...], "max": [...]}
    """

    def __init__(self, movies: list[Movie] | None = None) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._movies: list[Movie] = list(movies) if movies else []

    @classmethod
    def from_csv(
        cls,
        path: Path | str,
        separator: str | None = None,
        winner_yes: str | None = None,
    ) -> MovieStore:
        store = cls()
        store.load(path, separator=separator, winner_yes=winner_yes)
        return store

    def load(
        self,
        path: Path | str,
        separator: str | None = None,
        winner_yes: str | None = None,
    ) -> int:
        """Replace the store contents with a movie list file.

        Reading happens outside the lock; on error the current contents
        are kept. Returns the number of movies now held.
        """
        movies = read_movies_csv(path, separator=separator, winner_yes=winner_yes)
        with self._lock:
            self._movies = movies
            return len(self._movies)

    def all(self) -> list[Movie]:
        with self._lock:
            return list(self._movies)

    def winners(self) -> list[Movie]:
        """Winning movies in file order."""
        with self._lock:
            return [movie for movie in self._movies if movie.winner]

    def producer_intervals(self, unique_years: bool = False) -> IntervalResult:
        """Min/max producer intervals over the current winners."""
        return calculate(self.winners(), unique_years=unique_years)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._movies)
