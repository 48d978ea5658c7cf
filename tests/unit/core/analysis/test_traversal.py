from __future__ import annotations

"""
Unit tests for Syntax Tree Traversal.

Verifies pre-order visiting, ancestor stack maintenance and tag dispatch
on hand-built trees.
"""

from typing import List, Tuple

from funcnamer.core.analysis.traversal import (
    NodeVisitor,
    collect_identifier_names,
    iter_child_nodes,
    iter_nodes,
)
from funcnamer.domain.syntax_models import Node


def _sample_tree() -> Node:
    """var a = function () { return b; };"""
    inner = Node("ReturnStatement", {"argument": Node.identifier("b")})
    fn = Node("FunctionExpression", {
        "id": None,
        "params": [],
        "body": Node("BlockStatement", {"body": [inner]}),
    })
    declarator = Node("VariableDeclarator", {"id": Node.identifier("a"), "init": fn})
    declaration = Node("VariableDeclaration", {"declarations": [declarator], "kind": "var"})
    return Node("Program", {"body": [declaration], "sourceType": "script"})


class _Recorder(NodeVisitor):
    def __init__(self) -> None:
        self.seen: List[Tuple[str, List[str]]] = []

    def generic_visit(self, node, stack):
        self.seen.append((node.type, [n.type for n in stack]))
        super().generic_visit(node, stack)


class _FunctionSpy(NodeVisitor):
    def __init__(self) -> None:
        self.parents: List[str] = []

    def visit_FunctionExpression(self, node, stack):
        self.parents.append(stack[-1].type)
        self.generic_visit(node, stack)


def test_iter_child_nodes_skips_scalars():
    tree = _sample_tree()
    declaration = tree["body"][0]

    children = list(iter_child_nodes(declaration))

    assert [c.type for c in children] == ["VariableDeclarator"]


def test_iter_nodes_is_preorder():
    types = [n.type for n in iter_nodes(_sample_tree())]

    assert types == [
        "Program",
        "VariableDeclaration",
        "VariableDeclarator",
        "Identifier",
        "FunctionExpression",
        "BlockStatement",
        "ReturnStatement",
        "Identifier",
    ]


def test_visitor_maintains_ancestor_stack():
    """Each node is visited with the full chain of its ancestors."""
    recorder = _Recorder()
    recorder.traverse(_sample_tree())

    assert recorder.seen[0] == ("Program", [])
    assert ("FunctionExpression", ["Program", "VariableDeclaration", "VariableDeclarator"]) in recorder.seen
    last_type, last_stack = recorder.seen[-1]
    assert last_type == "Identifier"
    assert last_stack[-1] == "ReturnStatement"


def test_visitor_dispatches_on_type_tag():
    spy = _FunctionSpy()
    stack: List[Node] = []

    spy.visit(_sample_tree(), stack)

    assert spy.parents == ["VariableDeclarator"]
    assert stack == []


def test_collect_identifier_names():
    assert collect_identifier_names(_sample_tree()) == ["a", "b"]
