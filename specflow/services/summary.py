from __future__ import annotations

from ..models.compile_result import CompileResult

"""SUMMARY line rendering for the journey compiler.

Format:
SUMMARY journeys={n} steps={steps} artifacts={written} warnings={w} source={name} elapsed_sec={t}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very small durations
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: CompileResult) -> str:
    """Render the SUMMARY line for a compile run.

    Examples:
        >>> from specflow.models.compile_result import CompileResult
        >>> render_summary_line(CompileResult(source="journeys.csv", journeys={}))
        'SUMMARY journeys=0 steps=0 artifacts=0 warnings=0 source=journeys.csv elapsed_sec=0'
    """
    return (
        f"SUMMARY journeys={result.journey_count} "
        f"steps={result.step_count} "
        f"artifacts={len(result.written)} "
        f"warnings={len(result.warnings)} "
        f"source={result.source} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
