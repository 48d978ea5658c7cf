from __future__ import annotations

"""
Syntax Tree Traversal.

Depth-first, pre-order walking of Node trees with an explicit ancestor
stack. Dispatch is keyed on the node's ``type`` tag, in the manner of
``ast.NodeVisitor``: a ``visit_<Type>`` method handles its tag, and every
other node falls through to ``generic_visit``.
"""

from typing import Iterator, List

from funcnamer.domain.syntax_models import Node

AncestorStack = List[Node]


# -----------------------------------------------------------------------------
# CHILD ENUMERATION
# -----------------------------------------------------------------------------

def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct children of a node, in field order."""
    for value in node.fields.values():
        if isinstance(value, Node):
            yield value
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, Node):
                    yield item


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node of the tree in pre-order, root included."""
    pending = [root]
    while pending:
        node = pending.pop()
        yield node
        children = list(iter_child_nodes(node))
        pending.extend(reversed(children))


def collect_identifier_names(root: Node) -> List[str]:
    """Return the name of every Identifier node in the tree, in source order."""
    return [node.name for node in iter_nodes(root) if node.type == "Identifier" and node.name]


# -----------------------------------------------------------------------------
# VISITOR
# -----------------------------------------------------------------------------

class NodeVisitor:
    """
    Base class for ancestor-aware tree visitors.

    ``visit`` is called with the node and the stack of its ancestors (the
    last element being the immediate parent). ``generic_visit`` pushes the
    node, visits its children and pops it again, so subclasses that handle a
    tag and still want the subtree walked call ``generic_visit`` themselves.
    """

    def traverse(self, root: Node) -> None:
        """Walk a whole tree starting with an empty ancestor stack."""
        self.visit(root, [])

    def visit(self, node: Node, stack: AncestorStack) -> None:
        method = getattr(self, f"visit_{node.type}", self.generic_visit)
        method(node, stack)

    def generic_visit(self, node: Node, stack: AncestorStack) -> None:
        stack.append(node)
        try:
            for child in iter_child_nodes(node):
                self.visit(child, stack)
        finally:
            stack.pop()
