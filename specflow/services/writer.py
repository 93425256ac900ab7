from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from ..config.loader import OutputLayout
from ..models.artifact import GeneratedArtifact
from .progress import ProgressTracker

"""Output writer for generated artifacts.

Slug rule: J-SIGNUP-FLOW -> signup_flow (strip "J-", lower-case, "-" -> "_").
Paths: {contracts_dir}/journey_{slug}.{contract_extension} and
{tests_dir}/journey_{slug}.{test_extension}, relative to the project root.

Files are overwritten unconditionally. A failed write raises and the
remaining journeys are not written.
"""

__all__ = [
    "journey_slug",
    "artifact_paths",
    "write_artifacts",
]

logger = logging.getLogger(__name__)

_ID_PREFIX = "J-"


def journey_slug(journey_id: str) -> str:
    """Convert a journey id to a filename slug (J-CHECKOUT-V2 -> checkout_v2)."""
    slug = journey_id[len(_ID_PREFIX):] if journey_id.startswith(_ID_PREFIX) else journey_id
    return slug.lower().replace("-", "_")


def artifact_paths(journey_id: str, layout: OutputLayout) -> tuple[PurePosixPath, PurePosixPath]:
    """Return (contract_path, test_path) relative to the project root."""
    stem = f"journey_{journey_slug(journey_id)}"
    contract = PurePosixPath(layout.contracts_dir) / f"{stem}.{layout.contract_extension}"
    test = PurePosixPath(layout.tests_dir) / f"{stem}.{layout.test_extension}"
    return contract, test


def write_artifacts(
    artifacts: dict[str, tuple[GeneratedArtifact, GeneratedArtifact]],
    root: Path,
    layout: OutputLayout,
) -> list[Path]:
    """Write every journey's contract and stub under root.

    Args:
        artifacts: journey_id -> (contract, test stub)
        root: Project root directory
        layout: Target directories (created if missing)

    Returns:
        Paths written (root joined with each artifact path), in write order

    Raises:
        OSError: from directory creation or file writes, unchanged
    """
    for directory in (layout.contracts_dir, layout.tests_dir):
        (root / directory).mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    with ProgressTracker(len(artifacts), description="Writing journeys") as progress:
        for journey_id, pair in artifacts.items():
            progress.start_journey(journey_id)
            for artifact in pair:
                target = root / Path(artifact.path)
                target.parent.mkdir(parents=True, exist_ok=True)
                with target.open("w", encoding="utf-8", newline="\n") as f:
                    f.write(artifact.content)
                logger.debug(f"wrote {artifact.kind.value}: {target}")
                written.append(target)
            progress.finish_journey()
    return written
