from __future__ import annotations

"""
Global Application Constants.

Naming scheme, default filters and parser goals shared across the
annotation engine, the pipeline and the CLI.
"""

from typing import FrozenSet, Tuple

# -----------------------------------------------------------------------------
# APPLICATION METADATA
# -----------------------------------------------------------------------------
APP_NAME: str = "funcnamer"

# -----------------------------------------------------------------------------
# NAMING SCHEME
# -----------------------------------------------------------------------------
NAME_PREFIX: str = "ANONYMOUS_FUNC_"

# -----------------------------------------------------------------------------
# FILTERING DEFAULTS
# -----------------------------------------------------------------------------
DEFAULT_SCRIPT_EXTENSION: str = ".js"

# Version control metadata is never rewritten or mirrored
DEFAULT_EXCLUDES: Tuple[str, ...] = (".git", ".hg", ".svn")

# -----------------------------------------------------------------------------
# PARSER / ENGINE OPTIONS
# -----------------------------------------------------------------------------
SOURCE_TYPES: FrozenSet[str] = frozenset({"auto", "script", "module"})
COUNTER_SCOPES: FrozenSet[str] = frozenset({"file", "run"})

DEFAULT_SOURCE_TYPE: str = "auto"
DEFAULT_COUNTER_SCOPE: str = "file"
