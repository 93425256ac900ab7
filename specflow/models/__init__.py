"""Domain models for the specflow journey compiler.

Row and journey records flow through the pipeline in this order:
RawRow (reader) -> JourneyRow (validator) -> Journey / JourneyStep (grouper)
-> GeneratedArtifact (generators) -> CompileResult (orchestrator).
"""

from .artifact import ArtifactKind, GeneratedArtifact
from .compile_result import CompileResult
from .journey import Journey, JourneyRow, JourneyStep, RawRow
from .validation_issue import ValidationIssue

__all__ = [
    # Table records
    "RawRow",
    "JourneyRow",
    # Aggregates
    "Journey",
    "JourneyStep",
    # Output
    "ArtifactKind",
    "GeneratedArtifact",
    "CompileResult",
    # Errors
    "ValidationIssue",
]
