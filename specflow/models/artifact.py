from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

"""GeneratedArtifact model and ArtifactKind enum.

An artifact is a pure derivation of one Journey: where it goes (relative to
the project root) and what it contains. Two are produced per journey, one of
each kind.
"""

__all__ = [
    "ArtifactKind",
    "GeneratedArtifact",
]


class ArtifactKind(Enum):
    """Kind of generated file.

    - CONTRACT: YAML journey contract (docs/contracts by default)
    - TEST: Playwright test stub (tests/e2e by default)
    """
    CONTRACT = "contract"
    TEST = "test"


@dataclass(frozen=True)
class GeneratedArtifact:
    kind: ArtifactKind
    path: PurePosixPath  # relative to project root
    content: str
