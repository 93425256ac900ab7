from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import CompilerConfig, OutputLayout
from ..models.artifact import ArtifactKind, GeneratedArtifact
from ..models.compile_result import CompileResult
from ..models.journey import Journey
from ..table.reader import parse_table
from .contract_yaml import render_contract
from .grouping import group_journeys
from .playwright_stub import render_stub
from .validation import validate_rows
from .writer import artifact_paths, write_artifacts

"""Compile orchestration for the journey compiler.

Pipeline: parse_table -> validate_rows -> group_journeys ->
render_contract / render_stub per journey -> write_artifacts.

Every ValidationIssue is raised before the first file is written, so a
failing input never leaves a half-updated set of artifacts behind.
"""

logger = logging.getLogger(__name__)


def current_date() -> str:
    """Today's date in UTC as YYYY-MM-DD."""
    return datetime.now(UTC).date().isoformat()


def build_artifacts(
    journey: Journey,
    *,
    source_name: str,
    today: str,
    layout: OutputLayout,
) -> tuple[GeneratedArtifact, GeneratedArtifact]:
    """Render the (contract, test stub) pair for one journey."""
    contract_path, test_path = artifact_paths(journey.journey_id, layout)
    contract = GeneratedArtifact(
        kind=ArtifactKind.CONTRACT,
        path=contract_path,
        content=render_contract(
            journey, source_name=source_name, today=today, test_path=str(test_path)
        ),
    )
    stub = GeneratedArtifact(
        kind=ArtifactKind.TEST,
        path=test_path,
        content=render_stub(journey),
    )
    return contract, stub


def compile_journeys(
    text: str,
    *,
    root: Path,
    config: CompilerConfig,
    source_name: str | None = None,
    write: bool = True,
) -> CompileResult:
    """Compile journey table text into contracts and stubs under root.

    Args:
        text: Full CSV text
        root: Project root the layout directories are relative to
        config: Compiler config (layout, pinned date, default source name)
        source_name: Name recorded as from_spec; config default when None
        write: False validates and renders without touching the filesystem

    Returns:
        CompileResult with journeys, written paths and warnings

    Raises:
        ValidationIssue: on the first structural problem (nothing written)
        OSError: when writing fails (journeys after the failing one are not written)
    """
    started = time.perf_counter()
    source = source_name or config.default_source_name
    today = config.today or current_date()

    rows = parse_table(text)
    validated = validate_rows(rows)
    grouped = group_journeys(validated)
    logger.debug(f"{len(validated)} rows -> {len(grouped.journeys)} journeys")

    artifacts = {
        journey_id: build_artifacts(
            journey, source_name=source, today=today, layout=config.layout
        )
        for journey_id, journey in grouped.journeys.items()
    }

    written: list[Path] = []
    if write:
        written = write_artifacts(artifacts, root, config.layout)

    return CompileResult(
        source=source,
        journeys=grouped.journeys,
        written=written,
        warnings=list(grouped.warnings),
        elapsed_seconds=time.perf_counter() - started,
    )


def compile_file(
    csv_path: Path,
    *,
    root: Path,
    config: CompilerConfig,
    write: bool = True,
) -> CompileResult:
    """Read csv_path (UTF-8) and compile it; from_spec is the file's name."""
    text = csv_path.read_text(encoding="utf-8")
    return compile_journeys(
        text, root=root, config=config, source_name=csv_path.name, write=write
    )
