"""
awards.producer_intervals — CLI for Golden Raspberry producer intervals.

Usage:
    python -m awards.producer_intervals
    python -m awards.producer_intervals --csv data/movielist.csv --json
    python -m awards.producer_intervals --csv movies.csv --separator , --quiet

Exit codes:
    0: OK — intervals computed (empty min/max lists included).
    1: Missing file — the movie list does not exist.
    2: Malformed file — header lacks required columns, file is not UTF-8,
       or the separator is not a single character.

Output:
    Default: human-readable summary to stdout.
    --json: {"min": [...], "max": [...]} to stdout.
    --quiet: no output, only exit code.

Log lines go to stderr so --json output stays machine-readable.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from awards.models import IntervalResult, ProducerInterval
from awards.movie_store import MovieDataError, MovieDataNotFoundError, MovieStore

logger = logging.getLogger("awards.cli")

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

ENV = os.getenv("ENV", "prod").lower().strip()
MOVIES_CSV = os.getenv("MOVIES_CSV", "data/movielist.csv").strip()

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK: int = 0
EXIT_MISSING_FILE: int = 1
EXIT_MALFORMED_FILE: int = 2


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if ENV == "dev" else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="producer-intervals",
        description=(
            "Find the Golden Raspberry producers with the shortest and "
            "longest gaps between two consecutive wins."
        ),
    )
    parser.add_argument(
        "--csv",
        default=MOVIES_CSV,
        help="Movie list file (default: $MOVIES_CSV or data/movielist.csv).",
    )
    parser.add_argument(
        "--separator",
        default=None,
        help="Column delimiter (default: $CSV_SEPARATOR or ';').",
    )
    parser.add_argument(
        "--winner-yes",
        default=None,
        help="Winner column value meaning 'won' (default: $CSV_WINNER_YES or 'yes').",
    )
    parser.add_argument(
        "--unique-years",
        action="store_true",
        help="Count a producer at most once per award year.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output the min/max result as JSON.",
    )
    output.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all output. Exit code only.",
    )
    return parser


def _print_block(label: str, intervals: list[ProducerInterval]) -> None:
    print(f"{label} ({len(intervals)}):")
    if not intervals:
        print("  (none)")
    for item in intervals:
        print(f"  • {item}")


def _print_summary(store: MovieStore, result: IntervalResult) -> None:
    print(f"Movies:   {store.count}")
    print(f"Winners:  {len(store.winners())}")
    print()
    _print_block("Min interval", result.min)
    _print_block("Max interval", result.max)


def main(argv: list[str] | None = None) -> int:
    """Compute producer intervals from a movie list. Returns exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    try:
        store = MovieStore.from_csv(
            args.csv,
            separator=args.separator,
            winner_yes=args.winner_yes,
        )
    except MovieDataNotFoundError as exc:
        logger.error(json.dumps({"event": "load_failed", "reason": exc.detail}))
        return EXIT_MISSING_FILE
    except MovieDataError as exc:
        logger.error(json.dumps({"event": "load_failed", "reason": exc.detail}))
        return EXIT_MALFORMED_FILE

    result = store.producer_intervals(unique_years=args.unique_years)
    logger.debug(
        "Intervals computed: %d min, %d max", len(result.min), len(result.max),
    )

    if args.quiet:
        return EXIT_OK

    if args.json_output:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return EXIT_OK

    _print_summary(store, result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
