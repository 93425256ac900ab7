from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ..models.journey import JourneyRow, RawRow
from ..models.validation_issue import ValidationIssue

"""Row validation for the journey table.

Two passes, both fail-fast:
1. Per row, in input order: journey_id format, owner, critical, step, and
   uniqueness of (journey_id, step).
2. Per journey (first-seen order): sorted step numbers must be exactly 1..N.

Running the sequencing check per group after all rows are seen means a
journey's rows need not be contiguous in the file.
"""

__all__ = [
    "JOURNEY_ID_PATTERN",
    "InvalidIdentifierError",
    "MissingOwnerError",
    "InvalidCriticalityError",
    "InvalidStepError",
    "DuplicateStepError",
    "NonSequentialStepsError",
    "validate_rows",
]

JOURNEY_ID_PATTERN = re.compile(r"^J-[A-Z][A-Z0-9-]+$")
_STEP_PATTERN = re.compile(r"^[0-9]+$")
_CRITICAL_VALUES = {"yes": True, "no": False}


class InvalidIdentifierError(ValidationIssue):
    error_type = "INVALID_IDENTIFIER"


class MissingOwnerError(ValidationIssue):
    error_type = "MISSING_OWNER"


class InvalidCriticalityError(ValidationIssue):
    error_type = "INVALID_CRITICALITY"


class InvalidStepError(ValidationIssue):
    error_type = "INVALID_STEP"


class DuplicateStepError(ValidationIssue):
    """Second occurrence of a (journey_id, step) pair.

    first_line holds the line of the earlier occurrence.
    """
    error_type = "DUPLICATE_STEP"

    def __init__(self, message: str, *, first_line: int, **kwargs: Any) -> None:
        self.first_line = first_line
        super().__init__(message, **kwargs)


class NonSequentialStepsError(ValidationIssue):
    """A journey's sorted steps are not 1..N."""
    error_type = "NON_SEQUENTIAL_STEPS"

    def __init__(self, message: str, *, expected: int, found: int, **kwargs: Any) -> None:
        self.expected = expected
        self.found = found
        super().__init__(message, **kwargs)


@dataclass(frozen=True)
class _StepRef:
    step: int
    line_number: int


def _parse_step(raw: str) -> int | None:
    text = raw.strip()
    if not _STEP_PATTERN.match(text):
        return None
    value = int(text, 10)
    return value if value >= 1 else None


def _validate_row(row: RawRow) -> JourneyRow:
    line = row.line_number
    journey_id = row.get("journey_id")

    if not JOURNEY_ID_PATTERN.match(journey_id):
        raise InvalidIdentifierError(
            f'journey_id "{journey_id}" must match {JOURNEY_ID_PATTERN.pattern}',
            line=line,
            field="journey_id",
            value=journey_id,
        )

    owner = row.get("owner").strip()
    if owner == "":
        raise MissingOwnerError(
            f'owner is required for journey "{journey_id}"',
            line=line,
            field="owner",
            value=row.get("owner"),
            journey_id=journey_id,
        )

    critical_raw = row.get("critical")
    critical = _CRITICAL_VALUES.get(critical_raw.lower())
    if critical is None:
        raise InvalidCriticalityError(
            f'critical must be "yes" or "no", got "{critical_raw}"',
            line=line,
            field="critical",
            value=critical_raw,
            journey_id=journey_id,
        )

    step_raw = row.get("step")
    step = _parse_step(step_raw)
    if step is None:
        raise InvalidStepError(
            f'step must be a positive integer, got "{step_raw}"',
            line=line,
            field="step",
            value=step_raw,
            journey_id=journey_id,
        )

    return JourneyRow(
        line_number=line,
        journey_id=journey_id,
        journey_name=row.get("journey_name"),
        step=step,
        user_does=row.get("user_does"),
        system_shows=row.get("system_shows"),
        critical=critical,
        owner=owner,
        notes=row.get("notes"),
    )


def _check_sequencing(groups: dict[str, list[_StepRef]]) -> None:
    for journey_id, refs in groups.items():
        ordered = sorted(refs, key=lambda r: r.step)
        for expected, ref in enumerate(ordered, start=1):
            if ref.step != expected:
                raise NonSequentialStepsError(
                    f'journey "{journey_id}": steps must be sequential starting at 1. '
                    f"Expected step {expected} but found {ref.step}",
                    expected=expected,
                    found=ref.step,
                    line=ref.line_number,
                    field="step",
                    value=str(ref.step),
                    journey_id=journey_id,
                )


def validate_rows(rows: list[RawRow]) -> list[JourneyRow]:
    """Validate every row and return typed JourneyRow records in input order.

    Args:
        rows: RawRow records from parse_table

    Returns:
        JourneyRow list, same order and length as rows

    Raises:
        ValidationIssue subclass for the first violation found
    """
    seen: dict[tuple[str, int], int] = {}
    groups: dict[str, list[_StepRef]] = {}
    validated: list[JourneyRow] = []

    for row in rows:
        jr = _validate_row(row)
        key = (jr.journey_id, jr.step)
        if key in seen:
            raise DuplicateStepError(
                f'duplicate step {jr.step} for journey "{jr.journey_id}" '
                f"(first defined at line {seen[key]})",
                first_line=seen[key],
                line=jr.line_number,
                field="step",
                value=str(jr.step),
                journey_id=jr.journey_id,
            )
        seen[key] = jr.line_number
        groups.setdefault(jr.journey_id, []).append(_StepRef(jr.step, jr.line_number))
        validated.append(jr)

    _check_sequencing(groups)
    return validated
