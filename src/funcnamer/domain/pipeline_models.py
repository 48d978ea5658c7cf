from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the data structures and factory functions used to communicate
results between the annotation engine, the pipeline driver and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class OutputDirectoryError(OSError):
    """Raised when a mirrored output directory cannot be created."""

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    One directory visited by the walker.

    Attributes:
        rel_path: Path relative to the walk root ('.' for the root itself).
        dirs: Names of the immediate subdirectories that will be descended into.
        files: Names of the files in the directory.
    """
    rel_path: str
    dirs: List[str]
    files: List[str]


@dataclass
class AnnotationResult:
    """
    Outcome of annotating one source text.

    Attributes:
        text: Output source text (the input itself when nothing changed).
        mutated: True if at least one function was named.
        names: Identifiers assigned, in traversal order.
        parse_error: Parse failure message, if the text was passed through.
    """
    text: str
    mutated: bool = False
    names: List[str] = field(default_factory=list)
    parse_error: Optional[str] = None


@dataclass(frozen=True)
class FileFailure:
    """
    Encapsulates a per-file failure.

    Attributes:
        rel_path: File path relative to the input root.
        error: Descriptive exception or error message.
    """
    rel_path: str
    error: str


@dataclass(frozen=True)
class RunResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure of the run as a whole.
        error: Descriptive message in case of failure.
        input_path: Normalized input directory.
        output_path: Normalized output directory.
        in_place: Whether the input tree was rewritten in place.
        dry_run: Whether the run was a simulation.
        processed: Script files run through the annotation engine.
        modified: Script files whose text changed.
        copied: Files copied through verbatim.
        parse_errors: Script files passed through after a parse failure.
        errors: Per-file failures (read/write/copy).
        failures: Details of the per-file failures and parse errors.
        error_log_path: Path of the written error report, if any.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str
    in_place: bool = False
    dry_run: bool = False

    processed: int = 0
    modified: int = 0
    copied: int = 0
    parse_errors: int = 0
    errors: int = 0

    failures: List[FileFailure] = field(default_factory=list)
    error_log_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        input_path: str,
        output_path: str = "",
        *,
        in_place: bool = False,
        dry_run: bool = False,
) -> RunResult:
    """Create a failed run result for a run that did no work."""
    return RunResult(
        ok=False,
        error=error,
        input_path=input_path,
        output_path=output_path,
        in_place=in_place,
        dry_run=dry_run,
    )


def create_success_result(
        input_path: str,
        output_path: str,
        counters: Dict[str, int],
        failures: Optional[List[FileFailure]] = None,
        *,
        in_place: bool = False,
        dry_run: bool = False,
        error_log_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> RunResult:
    """
    Create a completed run result.

    Args:
        input_path: Normalized input directory.
        output_path: Normalized output directory.
        counters: Execution counters keyed by RunResult field name.
        failures: Per-file failures collected during the run.
        in_place: Whether the run rewrote the input tree.
        dry_run: Whether the run was a simulation.
        error_log_path: Path of the persisted error report.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        RunResult: An immutable result object.
    """
    return RunResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        in_place=in_place,
        dry_run=dry_run,
        processed=int(counters.get("processed", 0)),
        modified=int(counters.get("modified", 0)),
        copied=int(counters.get("copied", 0)),
        parse_errors=int(counters.get("parse_errors", 0)),
        errors=int(counters.get("errors", 0)),
        failures=list(failures or []),
        error_log_path=error_log_path,
        summary=summary_extra or {},
    )
