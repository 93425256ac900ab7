from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .journey import Journey

"""Result model for one compiler invocation.

Collects what the CLI needs for its SUMMARY output: the journeys compiled,
the files written (in write order), and any non-fatal warnings.
"""

__all__ = [
    "CompileResult",
]


@dataclass(frozen=True)
class CompileResult:
    source: str  # CSV file name recorded as from_spec
    journeys: dict[str, Journey]  # journey_id -> Journey, first-seen order
    written: list[Path] = field(default_factory=list)  # empty in --check mode
    warnings: list[str] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def journey_count(self) -> int:
        return len(self.journeys)

    @property
    def step_count(self) -> int:
        return sum(len(j.steps) for j in self.journeys.values())
