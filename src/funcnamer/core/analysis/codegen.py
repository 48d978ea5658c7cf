from __future__ import annotations

"""
Range-Preserving Code Generator.

Regenerates source text from a SyntaxTree. Parsed nodes keep their original
text (formatting, comments and all) and engine-created identifiers on
function expressions are spliced in right after the ``function`` keyword,
or after the ``*`` of a generator.
"""

import logging
from typing import List, Tuple

from funcnamer.core.analysis.traversal import iter_nodes
from funcnamer.domain.syntax_models import GenerationError, Node, SyntaxTree

logger = logging.getLogger(__name__)

_LINE_TERMINATORS = "\n\r\u2028\u2029"

Edit = Tuple[int, str]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate(tree: SyntaxTree) -> str:
    """
    Serialize a (possibly mutated) tree back into source text.

    Args:
        tree: Tree produced by the parser, optionally mutated by the engine.

    Returns:
        str: Source text; identical to the parsed text when no node carries
             a synthetic identifier.

    Raises:
        GenerationError: If a synthetic identifier sits on a function whose
                         source position is unknown or unexpected.
    """
    edits = collect_edits(tree)
    if not edits:
        return tree.source
    logger.debug(f"Splicing {len(edits)} identifier(s) into regenerated source")
    return apply_edits(tree.source, edits)


def collect_edits(tree: SyntaxTree) -> List[Edit]:
    """List the (offset, text) insertions needed to express synthetic identifiers."""
    edits: List[Edit] = []
    for node in iter_nodes(tree.root):
        if node.type != "FunctionExpression":
            continue
        ident = node.get("id")
        if not isinstance(ident, Node) or ident.range is not None:
            continue
        if not ident.name:
            raise GenerationError("Synthetic function identifier has no name")
        if node.range is None:
            raise GenerationError(f"Cannot place '{ident.name}': function has no source range")
        offset = _identifier_offset(tree.source, node.range)
        edits.append((offset, f" {ident.name}"))
    return edits


def apply_edits(source: str, edits: List[Edit]) -> str:
    """Apply insertions to the source text, last offset first."""
    out = source
    for offset, text in sorted(edits, key=lambda e: e[0], reverse=True):
        out = out[:offset] + text + out[offset:]
    return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _identifier_offset(source: str, fn_range: Tuple[int, int]) -> int:
    """Locate where the identifier of a function expression belongs."""
    start, end = fn_range
    pos = start

    if source.startswith("async", pos):
        pos = _skip_trivia(source, pos + len("async"), end)

    if not source.startswith("function", pos):
        snippet = source[start:start + 20]
        raise GenerationError(f"Expected 'function' keyword at offset {pos}, found {snippet!r}")
    pos += len("function")

    after = _skip_trivia(source, pos, end)
    if after < end and source[after] == "*":
        return after + 1
    return pos


def _skip_trivia(source: str, pos: int, end: int) -> int:
    """Advance past whitespace and comments."""
    while pos < end:
        ch = source[pos]
        if ch.isspace() or ch == "\ufeff":
            pos += 1
        elif source.startswith("//", pos):
            pos += 2
            while pos < end and source[pos] not in _LINE_TERMINATORS:
                pos += 1
        elif source.startswith("/*", pos):
            close = source.find("*/", pos + 2, end)
            if close == -1:
                return end
            pos = close + 2
        else:
            break
    return pos
