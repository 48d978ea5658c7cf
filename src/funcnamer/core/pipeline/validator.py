from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline, ensuring that the configuration
dictionary conforms to the expected schema. Handles type coercion,
default value injection and the output/replace exclusivity rule.
"""

import logging
from typing import Any, Dict, FrozenSet, List, Tuple

from funcnamer.domain.config import get_default_config
from funcnamer.domain.constants import (
    COUNTER_SCOPES,
    DEFAULT_EXCLUDES,
    DEFAULT_SCRIPT_EXTENSION,
    SOURCE_TYPES,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (CLI, JSON files) into strictly typed
    parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Schema Definition (Declarative mapping)
    string_fields = ["input_path", "output_path", "error_log_path"]
    bool_fields = ["replace", "tolerant", "verbose"]
    choice_fields = {
        "source_type": SOURCE_TYPES,
        "counter_scope": COUNTER_SCOPES,
    }

    # 3. Field Processing & Normalization
    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field, choices in choice_fields.items():
        merged[field] = _as_choice(merged.get(field), defaults[field], choices, field, warnings, strict)

    merged["excludes"] = _as_list_str(
        merged.get("excludes"), list(DEFAULT_EXCLUDES), "excludes", warnings, strict
    )

    # 4. Domain-Specific Normalization
    merged["extension"] = _normalize_extension(merged.get("extension"), warnings, strict)
    _check_output_mode(merged, warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        fallback: str,
        choices: FrozenSet[str],
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Accept only one of the known option values."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': {value!r} is not one of {sorted(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s and s not in out:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extension(ext: Any, warnings: List[str], strict: bool) -> str:
    """Ensure the script extension is prefixed with a dot."""
    if not isinstance(ext, str) or not ext.strip():
        if ext not in (None, ""):
            msg = f"Invalid field 'extension': expected str, received {type(ext).__name__}."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Using fallback.")
        return DEFAULT_SCRIPT_EXTENSION

    e = ext.strip()
    if not e.startswith("."):
        if strict:
            raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
        warnings.append(f"Extension '{ext}' corrected to '.{e}'.")
        e = "." + e
    return e


def _check_output_mode(cfg: Dict[str, Any], warnings: List[str], strict: bool) -> None:
    """Exactly one of output_path and replace selects where results go."""
    if cfg["replace"] and cfg["output_path"]:
        msg = "Both 'output_path' and 'replace' are set; they are mutually exclusive."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Rewriting in place.")
        cfg["output_path"] = ""
    elif not cfg["replace"] and not cfg["output_path"]:
        msg = "Neither 'output_path' nor 'replace' is set."
        if strict:
            raise ValueError(msg)
        warnings.append(msg)
