from __future__ import annotations

from dataclasses import dataclass

"""Journey domain models for the specflow journey compiler.

RawRow is what the table reader produces (untyped, header -> string).
JourneyRow is the typed record the validator builds from a RawRow once every
structural rule has passed. JourneyStep / Journey are the aggregates the
grouper folds those rows into and the generators render.
"""

__all__ = [
    "RawRow",
    "JourneyRow",
    "JourneyStep",
    "Journey",
]


@dataclass(frozen=True)
class RawRow:
    """One data line of the journey table, keyed by header name.

    line_number is the 1-based physical line in the source text, so error
    messages point at the line a user sees in an editor.
    """
    line_number: int
    values: dict[str, str]

    def get(self, column: str) -> str:
        return self.values.get(column, "")


@dataclass(frozen=True)
class JourneyRow:
    """Typed view of a RawRow after validation."""
    line_number: int
    journey_id: str
    journey_name: str
    step: int
    user_does: str
    system_shows: str
    critical: bool
    owner: str
    notes: str


@dataclass(frozen=True)
class JourneyStep:
    step: int  # 1-based ordinal, contiguous within a journey
    user_does: str
    system_shows: str


@dataclass(frozen=True)
class Journey:
    """A completed journey: metadata from its first row plus every step.

    steps are ordered by ordinal (1..N, no gaps); notes keep insertion order.
    """
    journey_id: str
    name: str
    owner: str
    critical: bool
    steps: tuple[JourneyStep, ...] = ()
    notes: tuple[str, ...] = ()

    @property
    def criticality(self) -> str:
        """Definition-of-done label used in the journey contract."""
        return "critical" if self.critical else "important"
