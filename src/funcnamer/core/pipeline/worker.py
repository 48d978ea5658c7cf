from __future__ import annotations

"""
Per-File Processing Tasks.

Encapsulates the work done for a single file unit: script files are read,
annotated and written to their mirrored path; every other file is copied
through. Failures are captured in the returned status dictionary so that a
single bad file never stops the run.
"""

import logging
from typing import Any, Dict, Optional

from funcnamer.core.analysis.annotator import annotate_source
from funcnamer.domain.syntax_models import GenerationError, NameCounter
from funcnamer.infra.fs import copy_file, is_same_path, read_text, write_text

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def process_script_file(
        input_path: str,
        output_path: str,
        rel_path: str,
        *,
        source_type: str,
        tolerant: bool,
        counter: Optional[NameCounter] = None,
        dry_run: bool = False,
) -> Dict[str, Any]:
    """
    Annotate one script file and write the result to its mirrored path.

    Files that cannot be decoded or regenerated fall back to a verbatim
    copy, so no input file is ever dropped from the output tree.

    Args:
        input_path: Absolute path of the source file.
        output_path: Absolute path of the mirrored destination.
        rel_path: Path relative to the input root, used in diagnostics.
        source_type: Parse goal ('auto', 'script' or 'module').
        tolerant: Let the parser recover from non-fatal syntax errors.
        counter: Shared counter for run-scoped naming; per-file when None.
        dry_run: Compute the outcome without writing anything.

    Returns:
        Dict[str, Any]: Task result with 'ok', 'status' ('modified',
                        'unchanged', 'parse_error', 'copied' or 'failed'),
                        'rel_path', 'names' and 'error'.
    """
    logger.info(f"processing: {input_path}")

    try:
        source = read_text(input_path)
    except UnicodeDecodeError as e:
        logger.warning(f"not valid UTF-8, copying unmodified: {input_path}: {e}")
        return _fallback_copy(input_path, output_path, rel_path, str(e), dry_run)
    except OSError as e:
        logger.error(f"Failed to read {input_path}: {e}")
        return _result(False, "failed", rel_path, error=str(e))

    try:
        result = annotate_source(
            source,
            source_type=source_type,
            tolerant=tolerant,
            counter=counter,
            label=input_path,
        )
    except GenerationError as e:
        logger.error(f"code generation failed, copying unmodified: {input_path}: {e}")
        return _fallback_copy(input_path, output_path, rel_path, str(e), dry_run)

    if result.parse_error is not None:
        status = "parse_error"
    elif result.mutated:
        status = "modified"
        logger.info("    writing modified file")
    else:
        status = "unchanged"
        logger.info("    copying file (not modified)")

    if dry_run:
        return _result(True, status, rel_path, names=result.names, error=result.parse_error)

    # In-place runs leave untouched files alone
    if not result.mutated and is_same_path(input_path, output_path):
        return _result(True, status, rel_path, error=result.parse_error)

    try:
        write_text(output_path, result.text)
    except OSError as e:
        logger.error(f"Failed to write {output_path}: {e}")
        return _result(False, "failed", rel_path, error=str(e))

    return _result(True, status, rel_path, names=result.names, error=result.parse_error)


def copy_through_file(
        input_path: str,
        output_path: str,
        rel_path: str,
        *,
        dry_run: bool = False,
) -> Dict[str, Any]:
    """
    Copy a pass-through file verbatim to its mirrored path.

    Returns:
        Dict[str, Any]: Task result with status 'copied' or 'failed'.
    """
    logger.info(f"copying: {input_path}")

    if dry_run:
        return _result(True, "copied", rel_path)

    if copy_file(input_path, output_path):
        return _result(True, "copied", rel_path)
    return _result(False, "failed", rel_path, error=f"copy failed: {input_path} -> {output_path}")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _fallback_copy(input_path: str, output_path: str, rel_path: str, reason: str, dry_run: bool) -> Dict[str, Any]:
    """Copy a script file unmodified after its content could not be processed."""
    if dry_run or is_same_path(input_path, output_path) or copy_file(input_path, output_path):
        return _result(True, "copied", rel_path, error=reason)
    return _result(False, "failed", rel_path, error=f"{reason}; copy failed")


def _result(ok: bool, status: str, rel_path: str, names=None, error: Optional[str] = None) -> Dict[str, Any]:
    return {
        "ok": ok,
        "status": status,
        "rel_path": rel_path,
        "names": list(names or []),
        "error": error,
    }
