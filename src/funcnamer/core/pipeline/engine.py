from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the whole rewrite:
1. Validates configuration and resolves input/output directories.
2. Walks the input tree, pruning excluded directories.
3. Mirrors each directory into the output tree.
4. Annotates script files and copies every other file through.
5. Aggregates counters and persists an optional error report.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from funcnamer.core.pipeline.validator import validate_config
from funcnamer.core.pipeline.worker import copy_through_file, process_script_file
from funcnamer.core.services.walker import iter_directories
from funcnamer.domain.pipeline_models import (
    FileFailure,
    OutputDirectoryError,
    RunResult,
    create_error_result,
    create_success_result,
)
from funcnamer.domain.syntax_models import NameCounter
from funcnamer.infra.fs import (
    directory_exists,
    ensure_directory,
    is_same_path,
    normalize_path,
    split_path_segments,
)

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> RunResult:
    """
    Execute the full rewrite of an input tree.

    Per-file failures are isolated: they are logged, recorded in the result
    and the run carries on. Only the impossibility of creating an output
    directory aborts the run.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, parse and name everything without touching disk.

    Returns:
        RunResult: Object containing status, counters and failures.

    Raises:
        OutputDirectoryError: If a mirrored output directory cannot be created.
    """
    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_path = normalize_path(cfg["input_path"], os.getcwd()) if cfg["input_path"] else ""
    in_place = bool(cfg["replace"])

    if not input_path or not directory_exists(input_path):
        msg = f"Input directory doesn't exist: {input_path or cfg['input_path']}"
        logger.error(msg)
        return create_error_result(msg, input_path, in_place=in_place, dry_run=dry_run)

    if in_place:
        output_path = input_path
    elif cfg["output_path"]:
        output_path = normalize_path(cfg["output_path"], input_path)
    else:
        msg = "An output directory or in-place replacement is required."
        logger.error(msg)
        return create_error_result(msg, input_path, dry_run=dry_run)

    # An output directory that resolves to the input is an in-place run
    in_place = in_place or is_same_path(output_path, input_path)

    excludes = frozenset(cfg["excludes"])
    extension = cfg["extension"]
    run_counter = NameCounter() if cfg["counter_scope"] == "run" else None

    logger.debug(
        f"Rewriting {input_path} -> {output_path} "
        f"(in_place={in_place}, dry_run={dry_run}, excludes={sorted(excludes)})"
    )

    counters = {"processed": 0, "modified": 0, "copied": 0, "parse_errors": 0, "errors": 0}
    failures: List[FileFailure] = []

    # A nested output tree must not be fed back into its own walk
    def _is_output_root(path: str) -> bool:
        return not in_place and is_same_path(path, output_path)

    # -------------------------------------------------------------------------
    # 2) Walk & Mirror
    # -------------------------------------------------------------------------
    for entry in iter_directories(input_path, excludes, skip=_is_output_root):
        if any(segment in excludes for segment in split_path_segments(entry.rel_path)):
            continue

        dir_path = os.path.normpath(os.path.join(input_path, entry.rel_path))
        out_dir = os.path.normpath(os.path.join(output_path, entry.rel_path))

        if not dry_run and not ensure_directory(out_dir):
            raise OutputDirectoryError(f"can't create directory: {out_dir}")

        # Pass-through files already sit at their mirrored path
        mirrors_self = is_same_path(dir_path, out_dir)

        script_files: List[str] = []
        copy_files: List[str] = []
        for name in entry.files:
            if os.path.splitext(name)[1] == extension and name not in excludes:
                script_files.append(name)
            elif not mirrors_self:
                copy_files.append(name)

        # ---------------------------------------------------------------------
        # 3) Script Files
        # ---------------------------------------------------------------------
        for name in script_files:
            rel_file = os.path.normpath(os.path.join(entry.rel_path, name))
            res = process_script_file(
                os.path.join(dir_path, name),
                os.path.join(out_dir, name),
                rel_file,
                source_type=cfg["source_type"],
                tolerant=cfg["tolerant"],
                counter=run_counter,
                dry_run=dry_run,
            )
            counters["processed"] += 1
            _tally(res, counters, failures)

        # ---------------------------------------------------------------------
        # 4) Pass-Through Files
        # ---------------------------------------------------------------------
        for name in copy_files:
            rel_file = os.path.normpath(os.path.join(entry.rel_path, name))
            res = copy_through_file(
                os.path.join(dir_path, name),
                os.path.join(out_dir, name),
                rel_file,
                dry_run=dry_run,
            )
            _tally(res, counters, failures)

    # -------------------------------------------------------------------------
    # 5) Reporting
    # -------------------------------------------------------------------------
    error_log_path = ""
    if cfg["error_log_path"] and failures and not dry_run:
        error_log_path = finalize_error_reporting(cfg["error_log_path"], failures)

    logger.debug(f"Run finished: {counters}")
    return create_success_result(
        input_path,
        output_path,
        counters,
        failures,
        in_place=in_place,
        dry_run=dry_run,
        error_log_path=error_log_path,
        summary_extra={
            "extension": extension,
            "excludes": sorted(excludes),
            "source_type": cfg["source_type"],
            "counter_scope": cfg["counter_scope"],
        },
    )


def finalize_error_reporting(error_output_path: str, failures: List[FileFailure]) -> str:
    """
    Persist collected per-file failures to a plain text report.

    Args:
        error_output_path: Target filesystem path for the report.
        failures: Failures encountered during the run.

    Returns:
        str: The path of the written report, or an empty string if writing failed.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(error_output_path)), exist_ok=True)
        with open(error_output_path, "w", encoding="utf-8") as f:
            f.write("ANONYMOUS FUNCTION NAMING ERRORS REPORT:\n")
            f.write("=" * 80 + "\n")
            for failure in failures:
                f.write(f"FILE: {failure.rel_path}\n")
                f.write(f"ERROR: {failure.error}\n")
                f.write("-" * 80 + "\n")
    except OSError as e:
        logger.error(f"Failed to persist error report to '{error_output_path}': {e}")
        return ""
    return error_output_path


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _tally(res: Dict[str, Any], counters: Dict[str, int], failures: List[FileFailure]) -> None:
    """Fold one task result into the run counters."""
    status = res["status"]
    if not res["ok"]:
        counters["errors"] += 1
    elif status == "modified":
        counters["modified"] += 1
    elif status == "parse_error":
        counters["parse_errors"] += 1
    elif status == "copied":
        counters["copied"] += 1

    if res.get("error"):
        failures.append(FileFailure(rel_path=res["rel_path"], error=str(res["error"])))
