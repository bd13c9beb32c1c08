"""
awards.producers — Producer field parsing.

A movie's producers field may name several co-producers:

    "Steven Perry and Joel Silver"
    "Simon Kinberg, Matthew Vaughn, Hutch Parker, Robert Kulzer and Gregory Goodman"
    "Jerry Weintraub & Michael Lobell"

parse_producers() is the ONLY place that splits such a field. Names are
trimmed but otherwise kept verbatim: no case folding, no whitespace
collapsing inside a name.
"""

from __future__ import annotations

from awards.constants import PRODUCER_SEPARATOR_PATTERN


def parse_producers(value: str | None) -> list[str]:
    """Split a producers field into individual producer names.

    Separators are ``,``, ``&`` and the whole word ``and`` (any case).
    Empty fragments, e.g. from a trailing comma, are dropped.
    Never raises; None or blank input yields an empty list.
    """
    if value is None or not value.strip():
        return []

    names: list[str] = []
    for fragment in PRODUCER_SEPARATOR_PATTERN.split(value):
        name = fragment.strip()
        if name:
            names.append(name)
    return names
