from __future__ import annotations

"""
Anonymous Function Annotation Engine.

Runs one source text through Parse -> Traverse -> (Mutated | Unmutated) ->
Generate. Every unnamed function expression reached by the traversal gets
a synthetic identifier derived from its parent node; unmutated and
unparseable texts are returned exactly as given.
"""

import logging
from typing import List, Optional

from funcnamer.core.analysis.codegen import generate
from funcnamer.core.analysis.js_parser import parse
from funcnamer.core.analysis.naming import NameGenerator, base_name_for, is_grammar_named
from funcnamer.core.analysis.traversal import AncestorStack, NodeVisitor, collect_identifier_names
from funcnamer.domain.constants import DEFAULT_SOURCE_TYPE
from funcnamer.domain.pipeline_models import AnnotationResult
from funcnamer.domain.syntax_models import NameCounter, Node, ParseError, SyntaxTree

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# TREE VISITOR
# -----------------------------------------------------------------------------

class _FunctionNamer(NodeVisitor):
    """Assigns synthetic identifiers to anonymous FunctionExpression nodes."""

    def __init__(self, names: NameGenerator):
        self._names = names
        self.assigned: List[str] = []

    @property
    def mutated(self) -> bool:
        return bool(self.assigned)

    def visit_FunctionExpression(self, node: Node, stack: AncestorStack) -> None:
        self.name_function(node, stack)
        self.generic_visit(node, stack)

    def name_function(self, node: Node, stack: AncestorStack) -> Optional[str]:
        """Name one function expression; returns the new name, or None if untouched."""
        current = node.get("id")
        if isinstance(current, Node) and current.name:
            return None

        parent = stack[-1] if stack else None
        if is_grammar_named(parent):
            return None

        name = self._names.generate(base_name_for(parent))
        node["id"] = Node.identifier(name)
        self.assigned.append(name)
        return name


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def name_anonymous_functions(tree: SyntaxTree, counter: Optional[NameCounter] = None) -> List[str]:
    """
    Mutate a tree in place so that no processed function expression is anonymous.

    Args:
        tree: Parsed syntax tree.
        counter: Counter to draw fallback numbers from. A fresh one is used
                 when omitted, which scopes uniqueness to this tree.

    Returns:
        List[str]: Assigned identifiers in traversal order (empty if unmutated).
    """
    names = NameGenerator(counter, reserved=collect_identifier_names(tree.root))
    namer = _FunctionNamer(names)
    namer.traverse(tree.root)
    return namer.assigned


def annotate_source(
        source: str,
        *,
        source_type: str = DEFAULT_SOURCE_TYPE,
        tolerant: bool = True,
        counter: Optional[NameCounter] = None,
        label: str = "<source>",
) -> AnnotationResult:
    """
    Name the anonymous functions of one JavaScript source text.

    Parse failures are reported and the text is passed through unchanged.

    Args:
        source: JavaScript source text.
        source_type: Parse goal ('auto', 'script' or 'module').
        tolerant: Let the parser recover from non-fatal syntax errors.
        counter: Shared counter for run-scoped naming; per-call when None.
        label: Identifier of the source used in diagnostics (usually a path).

    Returns:
        AnnotationResult: Output text plus the mutation outcome.
    """
    try:
        tree = parse(source, source_type=source_type, tolerant=tolerant)
    except ParseError as e:
        logger.warning(f"parse error: {label}: {e}")
        return AnnotationResult(text=source, parse_error=str(e))

    for tolerated in tree.tolerated_errors:
        logger.warning(f"tolerated syntax error: {label}: {tolerated}")

    assigned = name_anonymous_functions(tree, counter)
    if not assigned:
        return AnnotationResult(text=source)

    logger.debug(f"{label}: named {len(assigned)} function(s): {', '.join(assigned)}")
    return AnnotationResult(text=generate(tree), mutated=True, names=assigned)
