from __future__ import annotations

import re

from ..models.journey import Journey
from .escaping import TS_SINGLE_QUOTED, escape

"""Playwright test stub generator.

One test.describe block per journey, one placeholder test per step in
ordinal order. Bodies are comments only; the stub is scaffolding for a
human to implement, not a runnable check.
"""

__all__ = [
    "PLAYWRIGHT_IMPORT",
    "render_stub",
]

PLAYWRIGHT_IMPORT = "import { test, expect } from '@playwright/test';"

_LINE_TERMINATORS = re.compile(r"[\r\n\u2028\u2029]")


def _comment(value: str) -> str:
    return _LINE_TERMINATORS.sub(" ", value)


def _literal(value: str) -> str:
    return f"'{escape(value, TS_SINGLE_QUOTED)}'"


def render_stub(journey: Journey) -> str:
    """Render the Playwright .spec.ts stub for one journey."""
    lines: list[str] = [
        PLAYWRIGHT_IMPORT,
        "",
        f"test.describe({_literal(f'{journey.journey_id}: {journey.name}')}, () => {{",
    ]
    for index, step in enumerate(journey.steps):
        if index > 0:
            lines.append("")
        lines.extend([
            f"  test({_literal(f'Step {step.step}: {step.user_does}')}, async ({{ page }}) => {{",
            "    // TODO: Implement",
            f"    // User does: {_comment(step.user_does)}",
            f"    // System shows: {_comment(step.system_shows)}",
            "  });",
        ])
    lines.append("});")
    return "\n".join(lines) + "\n"
