"""
awards.models — Immutable value objects for the producer interval domain.

    MovieWinRecord    — the two fields the interval calculator reads
    Movie             — one full row of the movie list
    ProducerInterval  — gap between two consecutive wins of one producer
    IntervalResult    — min/max interval sets, the calculator's output

All models are frozen pydantic models. Invariant violations raise
pydantic.ValidationError at construction time.

Wire contract (IntervalResult.to_dict()):
    {
      "min": [{"producer": str, "interval": int,
               "previousWin": int, "followingWin": int}, ...],
      "max": [...]
    }
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class MovieWinRecord(BaseModel):
    """Award year plus the raw producers field of a winning movie."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    year: int
    producers: str


class Movie(MovieWinRecord):
    """A movie list row. Year bounds are checked by the reader, not here."""

    id: Optional[int] = Field(default=None, gt=0)
    title: str = ""
    studios: str = ""
    winner: bool = False


class ProducerInterval(BaseModel):
    """Interval in years between two consecutive wins of one producer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    producer: str
    interval: int = Field(..., ge=0)
    previous_win: int = Field(..., alias="previousWin")
    following_win: int = Field(..., alias="followingWin")

    @field_validator("producer")
    @classmethod
    def _producer_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("producer must not be blank.")
        return v

    @model_validator(mode="after")
    def _interval_matches_wins(self) -> ProducerInterval:
        expected = self.following_win - self.previous_win
        if self.interval != expected:
            raise ValueError(
                f"interval ({self.interval}) must equal followingWin "
                f"({self.following_win}) - previousWin ({self.previous_win})."
            )
        return self

    @classmethod
    def between(
        cls,
        producer: str,
        previous_win: int,
        following_win: int,
    ) -> ProducerInterval:
        """Build an interval, deriving its length from the two win years."""
        return cls(
            producer=producer,
            interval=following_win - previous_win,
            previous_win=previous_win,
            following_win=following_win,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def __str__(self) -> str:
        return (
            f"{self.producer}: {self.interval} years "
            f"({self.previous_win} -> {self.following_win})"
        )


class IntervalResult(BaseModel):
    """Producers with the shortest and the longest gap between wins."""

    model_config = ConfigDict(frozen=True)

    min: list[ProducerInterval] = Field(default_factory=list)
    max: list[ProducerInterval] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.min and not self.max

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize to the min/max wire shape with camelCase keys."""
        return self.model_dump(by_alias=True)
