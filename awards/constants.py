"""
awards.constants — Single source of truth for Golden Raspberry constants.

Every module that needs these values MUST import from here.
No hardcoded duplicates anywhere in the codebase.

Runtime configuration (file paths, separators) lives next to the code
that reads it, as environment-driven module constants. Only frozen
domain and format constants belong here.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Year bounds
# ---------------------------------------------------------------------------

MIN_YEAR: int = 1900
"""Earliest award year accepted from the movie list."""

MAX_YEAR: int = 2100
"""Latest award year accepted from the movie list."""

# ---------------------------------------------------------------------------
# Movie list CSV format
# ---------------------------------------------------------------------------

DEFAULT_CSV_SEPARATOR: str = ";"

DEFAULT_WINNER_YES: str = "yes"
"""Winner column token meaning "won". Compared case-insensitively."""

REQUIRED_COLUMNS: tuple[str, ...] = (
    "year",
    "title",
    "studios",
    "producers",
    "winner",
)
"""Header columns every movie list must carry. ``id`` is optional."""

TEXT_COLUMNS: tuple[str, ...] = ("title", "studios", "producers")
"""Columns that must be non-blank after trimming."""

# ---------------------------------------------------------------------------
# Producer parsing
# ---------------------------------------------------------------------------

PRODUCER_SEPARATOR_PATTERN: re.Pattern[str] = re.compile(
    r"\s*(?:,|&|\band\b)\s*",
    re.IGNORECASE,
)
"""Separators between co-producers: comma, ampersand, or the whole word
``and`` in any case. ``Anderson`` or ``Brandy`` never split."""

