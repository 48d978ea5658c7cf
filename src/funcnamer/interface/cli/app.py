from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, optional JSON file and CLI
overrides), pipeline execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from funcnamer.core.pipeline.engine import run_pipeline
from funcnamer.core.pipeline.validator import validate_config
from funcnamer.domain.config import load_config
from funcnamer.domain.pipeline_models import OutputDirectoryError, RunResult
from funcnamer.infra.logging import LoggingConfig, configure_logging, get_logger
from funcnamer.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Invalid argument combinations make argparse print the usage and exit
    with status 2 before anything touches the filesystem.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 usage or missing
             input, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy: defaults < JSON file < CLI flags
    overrides = cli_args.args_to_overrides(args)
    base_conf = load_config(args.config_path)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    logging_conf = LoggingConfig(
        quiet=not clean_conf["verbose"],
        debug=bool(args.debug),
        log_file=args.log_file,
    )
    configure_logging(logging_conf, force=True)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not os.path.isdir(input_path):
        logger.error(f"Input directory doesn't exist: {input_path}")
        return EXIT_USAGE

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted.")
        return EXIT_INTERRUPTED
    except OutputDirectoryError as e:
        logger.critical(f"ERROR: {e}")
        return EXIT_FAILURE

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    if not result.ok:
        return EXIT_FAILURE
    return EXIT_OK if result.errors == 0 else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge CLI override values into the base configuration.

    Exclusion names given on the command line extend the configured ones,
    and the output mode chosen on the command line replaces the configured
    one.

    Args:
        base: The configuration loaded from defaults and file.
        overrides: Values taken from the command line.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)

    for k, v in overrides.items():
        if v is None or k == "excludes":
            continue
        out[k] = v

    extra = overrides.get("excludes") or []
    if extra:
        current = out.get("excludes") or []
        if isinstance(current, str):
            current = [x.strip() for x in current.split(",") if x.strip()]
        out["excludes"] = list(current) + [x for x in extra if x not in current]

    if overrides.get("output_path"):
        out["replace"] = False
    elif overrides.get("replace"):
        out["output_path"] = ""

    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: RunResult) -> None:
    """
    Print the execution result to standard output.

    Args:
        result: The run result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print("Dry run: no files were written.")

    target = "in place" if result.in_place else result.output_path
    print(f"Output: {target}")

    stats = {
        "processed": "Script files processed",
        "modified": "Script files modified",
        "copied": "Files copied through",
        "parse_errors": "Parse errors",
        "errors": "Errors",
    }
    for key, label in stats.items():
        print(f"{label}: {getattr(result, key)}")

    if result.error_log_path:
        print(f"Error report: {result.error_log_path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
