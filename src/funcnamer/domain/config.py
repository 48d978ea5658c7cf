from __future__ import annotations

"""
Configuration Domain Management.

Supplies the default run configuration and merges optional JSON
configuration files on top of it. The configuration is a plain dictionary
that drives the behavior of the pipeline.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from funcnamer.domain.constants import (
    DEFAULT_COUNTER_SCOPE,
    DEFAULT_EXCLUDES,
    DEFAULT_SCRIPT_EXTENSION,
    DEFAULT_SOURCE_TYPE,
)

logger = logging.getLogger(__name__)

# Keys a configuration file is allowed to set
CONFIG_KEYS = (
    "input_path",
    "output_path",
    "replace",
    "excludes",
    "extension",
    "source_type",
    "tolerant",
    "counter_scope",
    "verbose",
    "error_log_path",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "output_path": "",
        "replace": False,

        # Filtering
        "excludes": list(DEFAULT_EXCLUDES),
        "extension": DEFAULT_SCRIPT_EXTENSION,

        # Engine
        "source_type": DEFAULT_SOURCE_TYPE,
        "tolerant": True,
        "counter_scope": DEFAULT_COUNTER_SCOPE,

        # Diagnostics
        "verbose": True,
        "error_log_path": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a configuration file and merge it over the defaults.

    Unknown keys are ignored. A missing or corrupted file yields the
    defaults so that CLI arguments alone can still drive a run.

    Args:
        path: Path to a JSON configuration file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()

    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{path}'. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    ignored = sorted(set(data) - set(CONFIG_KEYS))
    if ignored:
        logger.debug(f"Ignored unknown config keys: {ignored}")

    return config
