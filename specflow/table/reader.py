from __future__ import annotations

import logging
import re

from ..models.journey import RawRow
from ..models.validation_issue import ValidationIssue

"""Journey table reader.

Parses the journey CSV into RawRow records:
- Lines split on LF or CRLF; blank lines are skipped (line numbers still count them)
- First non-blank line is the header; required headers must all be present
- Extra columns are tolerated and ignored, columns are matched by name
- Rows shorter than the header get "" for the missing trailing fields

The tokenizer is intentionally lenient (no error on unbalanced quotes);
malformed rows are caught by the validator through their field values.
"""

__all__ = [
    "REQUIRED_HEADERS",
    "MalformedInputError",
    "MissingHeaderError",
    "tokenize_line",
    "parse_table",
]

logger = logging.getLogger(__name__)

REQUIRED_HEADERS: tuple[str, ...] = (
    "journey_id",
    "journey_name",
    "step",
    "user_does",
    "system_shows",
    "critical",
    "owner",
    "notes",
)

FIELD_SEPARATOR = ","
QUOTE_CHAR = '"'

_LINE_SPLIT = re.compile(r"\r?\n")


class MalformedInputError(ValidationIssue):
    """Raised when the input has no usable header or data lines."""
    error_type = "MALFORMED_INPUT"


class MissingHeaderError(ValidationIssue):
    """Raised when a required column is absent from the header row."""
    error_type = "MISSING_HEADER"


def tokenize_line(line: str) -> list[str]:
    """Split one CSV line into trimmed field values.

    A doubled quote inside a quoted field is one literal quote; a separator
    inside quotes is content. Never raises.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == QUOTE_CHAR:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE_CHAR:
                current.append(QUOTE_CHAR)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == FIELD_SEPARATOR and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current).strip())
    return fields


def parse_table(text: str) -> list[RawRow]:
    """Parse full journey table text into RawRow records (input order).

    Raises:
        MalformedInputError: no non-blank lines, or a header with no data rows
        MissingHeaderError: a required header is missing
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    numbered = [
        (idx, line)
        for idx, line in enumerate(_LINE_SPLIT.split(text), start=1)
        if line.strip() != ""
    ]
    if not numbered:
        raise MalformedInputError("journey table is empty")

    header_line, header_text = numbered[0]
    headers = tokenize_line(header_text)
    for required in REQUIRED_HEADERS:
        if required not in headers:
            raise MissingHeaderError(
                f'missing required header "{required}"',
                line=header_line,
                field=required,
            )

    data = numbered[1:]
    if not data:
        raise MalformedInputError("journey table has no data rows", line=header_line)

    rows: list[RawRow] = []
    for line_number, line in data:
        values = tokenize_line(line)
        if len(values) < len(headers):
            # Known leniency: a truncated line still parses, validation decides.
            logger.debug(
                f"line {line_number}: {len(values)} fields for {len(headers)} headers, "
                "missing trailing fields default to empty"
            )
        row = {h: (values[j] if j < len(values) else "") for j, h in enumerate(headers)}
        rows.append(RawRow(line_number=line_number, values=row))
    return rows

