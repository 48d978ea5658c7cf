from __future__ import annotations

"""
JavaScript Parsing Service.

Wraps the esprima parser and converts its node objects into the tagged
Node variant used by the annotation engine. Every node keeps the source
range reported by the parser so that the code generator can re-emit the
original text around the rewritten spots.
"""

import logging
import re
from typing import Any, Tuple

import esprima

from funcnamer.domain.constants import SOURCE_TYPES
from funcnamer.domain.syntax_models import Node, ParseError, SyntaxTree

logger = logging.getLogger(__name__)

# Parser bookkeeping that is not part of the tree shape
_SKIPPED_KEYS = frozenset({"type", "range", "loc", "errors", "comments", "tokens"})
_LINE_PREFIX = re.compile(r"^Line \d+:\s*")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse(source: str, source_type: str = "auto", tolerant: bool = True) -> SyntaxTree:
    """
    Parse JavaScript source text into a SyntaxTree.

    Every allowed goal is tried strictly first ('auto' means script, then
    module), so files using import/export get the module goal instead of a
    recovered script parse. Error recovery is only used once all strict
    attempts failed.

    Args:
        source: JavaScript source text.
        source_type: Parse goal, one of 'auto', 'script' or 'module'.
        tolerant: Let the parser recover from non-fatal syntax errors.

    Returns:
        SyntaxTree: The converted tree with ranges on every parsed node.

    Raises:
        ParseError: If the text cannot be parsed under any allowed goal.
        ValueError: If source_type is unknown.
    """
    if source_type not in SOURCE_TYPES:
        raise ValueError(f"Unknown source type '{source_type}'. Expected one of {sorted(SOURCE_TYPES)}.")

    goals = ["script", "module"] if source_type == "auto" else [source_type]
    attempts = [(goal, False) for goal in goals]
    if tolerant:
        attempts += [(goal, True) for goal in goals]

    first_error: ParseError | None = None
    for goal, recover in attempts:
        try:
            program = _run_parser(source, goal, {"range": True, "tolerant": recover})
        except ParseError as e:
            logger.debug(f"Parse attempt as {goal} (tolerant={recover}) failed: {e}")
            if first_error is None:
                first_error = e
            continue

        tolerated = [str(err) for err in (getattr(program, "errors", None) or [])]
        root = to_node(program)
        if not isinstance(root, Node):
            raise ParseError("Parser returned no syntax tree")
        return SyntaxTree(root=root, source=source, source_type=goal, tolerated_errors=tolerated)

    assert first_error is not None
    raise first_error


def to_node(value: Any) -> Any:
    """
    Convert an esprima value into the engine's representation.

    Parser nodes become Node instances, lists are converted element-wise
    and every other value (strings, numbers, regex descriptors) is kept
    as-is.
    """
    if isinstance(value, list):
        return [to_node(item) for item in value]

    type_tag = getattr(value, "type", None)
    if not isinstance(type_tag, str) or not hasattr(value, "__dict__"):
        return value

    fields = {
        key: to_node(item)
        for key, item in vars(value).items()
        if key not in _SKIPPED_KEYS
    }
    return Node(type=type_tag, fields=fields, range=_as_range(getattr(value, "range", None)))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _run_parser(source: str, goal: str, options: dict) -> Any:
    """Invoke esprima for one goal, normalizing its failures into ParseError."""
    parse_fn = esprima.parseModule if goal == "module" else esprima.parseScript
    try:
        return parse_fn(source, options)
    except RecursionError:
        raise ParseError("Source nesting is too deep to parse")
    except Exception as e:
        # esprima reports syntax errors through its own Error type
        message = getattr(e, "description", None) or str(e) or type(e).__name__
        line = getattr(e, "lineNumber", None)
        if not isinstance(line, int):
            raise ParseError(str(message)) from e
        # ParseError adds the line prefix itself
        raise ParseError(_LINE_PREFIX.sub("", str(message), count=1), line) from e


def _as_range(raw: Any) -> Tuple[int, int] | None:
    """Normalize the parser's [start, end] pair."""
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        start, end = raw
        if isinstance(start, int) and isinstance(end, int):
            return (start, end)
    return None
