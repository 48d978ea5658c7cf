from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and sample JavaScript trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'funcnamer.domain.config'.
    """
    return {
        # IO Paths
        "input_path": str(tmp_path / "input"),
        "output_path": str(tmp_path / "output"),
        "replace": False,

        # Filtering
        "excludes": [".git", ".hg", ".svn"],
        "extension": ".js",

        # Engine
        "source_type": "auto",
        "tolerant": True,
        "counter_scope": "file",

        # Diagnostics
        "verbose": True,
        "error_log_path": "",
    }


@pytest.fixture
def js_project(tmp_path: Path) -> Path:
    """
    Create a small JavaScript project.

    Structure:
    /input
      app.js            (two anonymous functions)
      plain.js          (no anonymous functions)
      broken.js         (syntax error)
      README.md
      /lib
        util.js         (one anonymous function)
      /.git
        config
        hook.js
    """
    root = tmp_path / "input"
    root.mkdir()

    (root / "app.js").write_text(
        "var greet = function() { return 'hi'; };\n"
        "setTimeout(function() {}, 10);\n",
        encoding="utf-8",
    )
    (root / "plain.js").write_text(
        "function named() {\n    return 1;\n}\n",
        encoding="utf-8",
    )
    (root / "broken.js").write_text("var x = function( {\n", encoding="utf-8")
    (root / "README.md").write_text("# Sample\n", encoding="utf-8")

    lib = root / "lib"
    lib.mkdir()
    (lib / "util.js").write_text(
        "module.exports = { hello: function() {} };\n",
        encoding="utf-8",
    )

    git = root / ".git"
    git.mkdir()
    (git / "config").write_text("[core]\n", encoding="utf-8")
    (git / "hook.js").write_text("var h = function() {};\n", encoding="utf-8")

    return root
