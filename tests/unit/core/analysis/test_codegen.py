from __future__ import annotations

"""
Unit tests for the Range-Preserving Code Generator.

Verifies identity output for untouched trees and the placement of
synthetic identifiers for plain, generator and async functions.
"""

import pytest

from funcnamer.core.analysis.codegen import apply_edits, generate
from funcnamer.core.analysis.js_parser import parse
from funcnamer.core.analysis.traversal import iter_nodes
from funcnamer.domain.syntax_models import GenerationError, Node, SyntaxTree


def _name_all(source: str, name: str = "fn") -> str:
    """Parse, give every anonymous function expression a name, regenerate."""
    tree = parse(source)
    for i, node in enumerate(n for n in iter_nodes(tree.root) if n.type == "FunctionExpression"):
        if node.get("id") is None:
            node["id"] = Node.identifier(f"{name}{i}")
    return generate(tree)


def test_generate_unmutated_returns_source_verbatim():
    source = "var   a = 1 ;\n// keep me\nfunction  f ( ) { }\n"
    assert generate(parse(source)) == source


def test_generate_inserts_after_function_keyword():
    assert _name_all("x(function() {});") == "x(function fn0() {});"


def test_generate_keeps_existing_spacing():
    assert _name_all("x(function () {});") == "x(function fn0 () {});"


def test_generate_handles_generators():
    assert _name_all("var g = function*() {};") == "var g = function* fn0() {};"


def test_generate_handles_async_functions():
    assert _name_all("var a = async function() {};") == "var a = async function fn0() {};"


def test_generate_preserves_comments_and_formatting():
    source = "/* header */\nvar a = function(x) {\n  // body\n  return x;\n};\n"
    expected = "/* header */\nvar a = function fn0(x) {\n  // body\n  return x;\n};\n"
    assert _name_all(source) == expected


def test_generate_handles_multiple_nested_insertions():
    source = "var o = function() { return function() {}; };"
    assert _name_all(source) == "var o = function fn0() { return function fn1() {}; };"


def test_generate_rejects_function_without_range():
    fn = Node("FunctionExpression", {"id": Node.identifier("f"), "params": [], "body": None})
    tree = SyntaxTree(root=Node("Program", {"body": [fn]}), source="")

    with pytest.raises(GenerationError):
        generate(tree)


def test_apply_edits_uses_original_offsets():
    assert apply_edits("abcdef", [(2, "X"), (4, "Y")]) == "abXcdYef"
