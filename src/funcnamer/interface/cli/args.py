from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema, including help messages,
argument types and defaults. Provides logic to translate raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from funcnamer.domain.constants import (
    APP_NAME,
    COUNTER_SCOPES,
    DEFAULT_EXCLUDES,
    DEFAULT_SCRIPT_EXTENSION,
    SOURCE_TYPES,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the funcnamer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Add an identifying name to every anonymous JavaScript function "
                    "so that stack traces and profilers can tell them apart.",
    )

    # --- Path Management ---
    p.add_argument(
        "input_path",
        metavar="inputdir",
        help="Directory tree of JavaScript files to process.",
    )
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Output directory mirroring the input tree.",
    )
    target.add_argument(
        "-r", "--replace",
        action="store_true",
        help="Rewrite the files of the input tree in place.",
    )

    # --- Filtering ---
    p.add_argument(
        "-e", "--exclude",
        dest="excludes",
        action="append",
        default=None,
        metavar="NAME",
        help=f"File or directory name to leave alone (repeatable; "
             f"{', '.join(DEFAULT_EXCLUDES)} are always excluded).",
    )
    p.add_argument(
        "--ext",
        dest="extension",
        default=None,
        help=f"Extension of the files to rewrite (default: {DEFAULT_SCRIPT_EXTENSION}).",
    )

    # --- Engine Options ---
    p.add_argument(
        "--source-type",
        choices=sorted(SOURCE_TYPES),
        default=None,
        help="Parse goal; 'auto' tries script then module (default: auto).",
    )
    p.add_argument(
        "--no-tolerant",
        action="store_true",
        help="Treat every syntax error as fatal for the file.",
    )
    p.add_argument(
        "--counter-scope",
        choices=sorted(COUNTER_SCOPES),
        default=None,
        help="Reset the fallback counter per file or share it across the run (default: file).",
    )

    # --- Runtime Constraints and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration values; CLI flags take precedence.",
    )
    p.add_argument(
        "--error-log",
        dest="error_log_path",
        default=None,
        help="Write a report of per-file failures to this path.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write the log to this (rotating) file.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and name everything but write nothing.",
    )
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Don't report per-file progress.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a domain configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset. Keys whose flag was
                        not given map to None.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["replace"] = True if args.replace else None

    overrides["excludes"] = _flatten_names(args.excludes)
    overrides["extension"] = args.extension

    overrides["source_type"] = args.source_type
    overrides["tolerant"] = False if args.no_tolerant else None
    overrides["counter_scope"] = args.counter_scope

    overrides["verbose"] = False if args.quiet else None
    overrides["error_log_path"] = args.error_log_path

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _flatten_names(values: Optional[List[str]]) -> Optional[List[str]]:
    """
    Accept both repeated flags and comma-separated values.
    """
    if not values:
        return None
    names: List[str] = []
    for value in values:
        names.extend(x.strip() for x in value.split(",") if x.strip())
    return names
