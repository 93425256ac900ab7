from __future__ import annotations

from ..models.journey import Journey
from .escaping import YAML, escape, scalar

"""Journey contract (YAML) generator.

Renders one Journey into the journey contract consumed by the contract test
runner. The text is built line by line rather than through a YAML dumper so
the section order and layout are fixed and diffs between runs stay minimal.

Sections, in order: journey_meta, preconditions, steps,
acceptance_criteria (only when the journey has notes), test_hooks.
"""

__all__ = [
    "CONTRACT_TYPE",
    "INITIAL_STATUS",
    "EXPECTATION_TYPE",
    "render_contract",
]

CONTRACT_TYPE = "e2e"
INITIAL_STATUS = "not_tested"
EXPECTATION_TYPE = "element_visible"
DEFAULT_PRECONDITION = "None - journey starts from blank state"


def _quoted(value: str) -> str:
    return f'"{escape(value, YAML)}"'


def render_contract(journey: Journey, *, source_name: str, today: str, test_path: str) -> str:
    """Render the YAML contract for one journey.

    Args:
        journey: Completed journey (steps already in ordinal order)
        source_name: CSV file name recorded as from_spec
        today: ISO date (YYYY-MM-DD) recorded as last_verified
        test_path: Project-relative path of the matching test stub

    Returns:
        Contract text ending with a newline
    """
    lines: list[str] = [
        "journey_meta:",
        f"  id: {journey.journey_id}",
        f"  from_spec: {_quoted(source_name)}",
        "  covers_reqs: []",
        f"  type: {_quoted(CONTRACT_TYPE)}",
        f"  dod_criticality: {journey.criticality}",
        f"  status: {INITIAL_STATUS}",
        f"  last_verified: {_quoted(today)}",
        f"  owner: {scalar(journey.owner, YAML)}",
        "",
        "preconditions:",
        f"  - description: {_quoted(DEFAULT_PRECONDITION)}",
        "    setup_hint: null",
        "",
        "steps:",
    ]
    for step in journey.steps:
        lines.extend([
            f"  - step: {step.step}",
            f"    name: {scalar(step.user_does, YAML)}",
            "    expected:",
            f"      - type: {_quoted(EXPECTATION_TYPE)}",
            f"        description: {scalar(step.system_shows, YAML)}",
        ])
    lines.append("")

    if journey.notes:
        lines.append("acceptance_criteria:")
        lines.extend(f"  - {scalar(note, YAML)}" for note in journey.notes)
        lines.append("")

    lines.extend([
        "test_hooks:",
        f"  e2e_test_file: {_quoted(test_path)}",
    ])
    return "\n".join(lines) + "\n"
