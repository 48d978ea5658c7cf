from __future__ import annotations

"""
Unit tests for the Anonymous Function Annotation Engine.

Verifies context-derived naming, nesting, uniqueness, idempotence,
identity on no-op inputs and parse-failure pass-through.
"""

import re

from funcnamer.core.analysis.annotator import annotate_source
from funcnamer.domain.syntax_models import NameCounter


def test_variable_context_names_function():
    result = annotate_source("var greet = function() {};")

    assert result.mutated is True
    assert result.names == ["ANONYMOUS_FUNC_greet_0"]
    assert result.text == "var greet = function ANONYMOUS_FUNC_greet_0() {};"


def test_property_context_names_function():
    result = annotate_source("var o = { hello: function() {} };")

    assert result.text == "var o = { hello: function ANONYMOUS_FUNC_hello_0() {} };"


def test_call_argument_gets_counter_only_name():
    result = annotate_source("setTimeout(function() {}, 10);")

    assert result.names == ["ANONYMOUS_FUNC_0"]
    assert result.text == "setTimeout(function ANONYMOUS_FUNC_0() {}, 10);"


def test_nested_functions_are_named_independently():
    result = annotate_source("var outer = function() { return function() {}; };")

    assert result.names == ["ANONYMOUS_FUNC_outer_0", "ANONYMOUS_FUNC_1"]
    assert result.text == (
        "var outer = function ANONYMOUS_FUNC_outer_0() { return function ANONYMOUS_FUNC_1() {}; };"
    )


def test_generated_names_are_unique():
    source = (
        "var a = function() {};\n"
        "var a = function() {};\n"
        "[function() {}, function() {}];\n"
        "var o = { a: function() {} };\n"
    )
    result = annotate_source(source)

    assert len(result.names) == 5
    assert len(set(result.names)) == 5
    assert result.names[:2] == ["ANONYMOUS_FUNC_a_0", "ANONYMOUS_FUNC_a_1"]


def test_second_pass_is_identity():
    first = annotate_source("var x = function() { [1].map(function(v) { return v; }); };")
    second = annotate_source(first.text)

    assert first.mutated is True
    assert second.mutated is False
    assert second.text == first.text


def test_no_anonymous_functions_is_identity():
    source = "function named() {\n    return 1;\n}\n\nvar f = function g() {};  // named\n"
    result = annotate_source(source)

    assert result.mutated is False
    assert result.names == []
    assert result.text == source


def test_grammar_named_functions_are_untouched():
    source = "var o = { m() {}, get x() { return 1; } };\nclass A { run() {} }\n"
    result = annotate_source(source)

    assert result.mutated is False
    assert result.text == source


def test_arrow_functions_are_untouched():
    source = "var f = () => 1;\n"
    assert annotate_source(source).text == source


def test_literal_key_uses_counter_only_name():
    result = annotate_source("var o = { 'a-b': function() {} };")
    assert result.names == ["ANONYMOUS_FUNC_0"]


def test_names_avoid_existing_identifiers():
    result = annotate_source("var ANONYMOUS_FUNC_0 = 1;\nsetTimeout(function() {});\n")
    assert result.names == ["ANONYMOUS_FUNC_1"]


def test_parse_failure_passes_text_through():
    source = "var x = function( {\n"
    result = annotate_source(source)

    assert result.mutated is False
    assert result.text == source
    assert result.parse_error


def test_shared_counter_spans_calls():
    counter = NameCounter()
    annotate_source("x(function() {});", counter=counter)
    result = annotate_source("y(function() {});", counter=counter)

    assert result.names == ["ANONYMOUS_FUNC_1"]


def test_module_sources_are_annotated():
    result = annotate_source('import a from "a";\nexport var f = function() {};\n')

    assert re.search(r"function ANONYMOUS_FUNC_f_0\(\)", result.text)


def test_module_source_logs_no_tolerated_errors(caplog):
    source = 'import a from "a";\nexport var f = function() {};\n'

    with caplog.at_level("WARNING", logger="funcnamer.core.analysis.annotator"):
        result = annotate_source(source, label="mod.js")

    assert result.names == ["ANONYMOUS_FUNC_f_0"]
    assert "tolerated syntax error" not in caplog.text
