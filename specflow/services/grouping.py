from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..models.journey import Journey, JourneyRow, JourneyStep

"""Journey grouping service.

Folds validated JourneyRow records into Journey aggregates keyed by
journey_id (first-seen order). The first row of a journey fixes its name,
owner and criticality. A later row with a different criticality is not an
error: the first value is kept and a warning is recorded in the result.
"""

__all__ = [
    "GroupingResult",
    "group_journeys",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingResult:
    journeys: dict[str, Journey]
    warnings: list[str] = field(default_factory=list)


@dataclass
class _JourneyDraft:
    journey_id: str
    name: str
    owner: str
    critical: bool
    steps: list[JourneyStep] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    def freeze(self) -> Journey:
        return Journey(
            journey_id=self.journey_id,
            name=self.name,
            owner=self.owner,
            critical=self.critical,
            steps=tuple(sorted(self.steps, key=lambda s: s.step)),
            notes=tuple(self.notes),
        )


def _flag(critical: bool) -> str:
    return "yes" if critical else "no"


def group_journeys(rows: list[JourneyRow]) -> GroupingResult:
    """Group validated rows into journeys.

    Args:
        rows: Output of validate_rows (assumed valid; nothing is re-checked)

    Returns:
        GroupingResult with journeys in first-seen order and any
        inconsistent-criticality warnings
    """
    drafts: dict[str, _JourneyDraft] = {}
    warnings: list[str] = []

    for row in rows:
        draft = drafts.get(row.journey_id)
        if draft is None:
            draft = _JourneyDraft(
                journey_id=row.journey_id,
                name=row.journey_name,
                owner=row.owner,
                critical=row.critical,
            )
            drafts[row.journey_id] = draft
        elif row.critical != draft.critical:
            message = (
                f'journey "{row.journey_id}" has inconsistent critical values '
                f'(line {row.line_number} says "{_flag(row.critical)}"). '
                f'Using "{_flag(draft.critical)}" from first row.'
            )
            logger.warning(message)
            warnings.append(message)

        draft.steps.append(
            JourneyStep(step=row.step, user_does=row.user_does, system_shows=row.system_shows)
        )
        note = row.notes.strip()
        if note:
            draft.notes.append(note)

    journeys = {jid: d.freeze() for jid, d in drafts.items()}
    return GroupingResult(journeys=journeys, warnings=warnings)
