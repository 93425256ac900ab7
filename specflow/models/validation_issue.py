from __future__ import annotations

"""ValidationIssue: base error for journey table problems.

Every structural failure in the journey table (parser and validator alike)
is raised as a subclass of ValidationIssue. Each carries the 1-based source
line it was detected on (None when the whole input is unusable), plus the
offending field / value / journey id when known, so the CLI can point the
user straight at the row.
"""

__all__ = [
    "ValidationIssue",
]


class ValidationIssue(Exception):
    """Fatal structural problem in the journey table.

    Attributes:
        message: Human-readable description (without the line prefix)
        line: 1-based source line number, or None if not tied to a line
        field: Column name involved, if any
        value: Offending raw value, if any
        journey_id: Journey identifier involved, if any
    """

    error_type = "VALIDATION_ISSUE"

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        field: str | None = None,
        value: str | None = None,
        journey_id: str | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.field = field
        self.value = value
        self.journey_id = journey_id
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"Line {self.line}: {self.message}"

