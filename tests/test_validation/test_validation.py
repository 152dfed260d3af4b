"""Tests for analyzer rules and the analyzer entry points."""

import pytest

from axcss.errors import CompileError
from axcss.model.diagnostic import Diagnostic, Severity
from axcss.validation import SourceDocument, analyze, analyze_or_raise
from axcss.validation.rules import (
    check_braces,
    check_component_headers,
    check_declarations,
    check_duplicate_parameters,
    check_instance_components,
    check_instance_properties,
    check_required_parameters,
    check_undeclared_variables,
    check_when_variables,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _doc(text: str) -> SourceDocument:
    return SourceDocument.from_text(text)


VALID = """\
component Button($bg: #333, $state: idle) {
  background: $bg;
  when $state == active {
    &:hover { opacity: .8; }
  }
}

Button.primary { $bg: #07f; $state: active; }
"""


# ---------------------------------------------------------------------------
# check_braces
# ---------------------------------------------------------------------------


class TestCheckBraces:
    def test_balanced(self):
        assert check_braces(_doc(VALID)) == []

    def test_unmatched_close(self):
        diags = check_braces(_doc("a {\n}\n}"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert (diags[0].line, diags[0].column) == (3, 1)
        assert "Unmatched closing" in diags[0].message

    def test_unclosed_open(self):
        diags = check_braces(_doc(".a { color: red;\n.b { color: blue; }"))
        assert len(diags) == 1
        assert (diags[0].line, diags[0].column) == (1, 4)
        assert "Unclosed block" in diags[0].message

    def test_each_defect_reported(self):
        diags = check_braces(_doc("} {\n{"))
        assert len(diags) == 3

    def test_braces_in_comments_ignored(self):
        assert check_braces(_doc("/* { */ a { b: c; }")) == []


# ---------------------------------------------------------------------------
# check_component_headers
# ---------------------------------------------------------------------------


class TestCheckComponentHeaders:
    def test_valid_header(self):
        assert check_component_headers(_doc(VALID)) == []

    def test_missing_parameter_list(self):
        diags = check_component_headers(_doc("component Foo { color: red; }"))
        assert len(diags) == 1
        assert "missing parameter list" in diags[0].message
        assert (diags[0].line, diags[0].column) == (1, 1)

    def test_unclosed_parameter_list(self):
        diags = check_component_headers(_doc("component Foo($a {\n  color: red; }"))
        assert len(diags) == 1
        assert "missing closing `)`" in diags[0].message
        assert (diags[0].line, diags[0].column) == (1, 14)

    def test_parenthesised_default_is_fine(self):
        text = "component S($c: rgba(0, 0, 0, .2)) { box-shadow: 0 0 1px $c; }"
        assert check_component_headers(_doc(text)) == []

    def test_missing_body(self):
        diags = check_component_headers(_doc("component Foo($a)"))
        assert len(diags) == 1
        assert "missing component body" in diags[0].message

    def test_plain_css_class_named_component(self):
        assert check_component_headers(_doc(".component { a: b; }")) == []


# ---------------------------------------------------------------------------
# check_duplicate_parameters
# ---------------------------------------------------------------------------


class TestCheckDuplicateParameters:
    def test_duplicate(self):
        diags = check_duplicate_parameters(_doc("component A($x, $x: 1) { color: $x; }"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert "Duplicate parameter 'x'" in diags[0].message

    def test_unique(self):
        assert check_duplicate_parameters(_doc(VALID)) == []


# ---------------------------------------------------------------------------
# check_undeclared_variables
# ---------------------------------------------------------------------------


class TestCheckUndeclaredVariables:
    def test_undeclared_is_warning_with_position(self):
        diags = check_undeclared_variables(_doc("component A() { color: $nope; }"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert (diags[0].line, diags[0].column) == (1, 24)

    def test_reported_once_per_variable(self):
        diags = check_undeclared_variables(_doc("component A() { a: $n; b: $n; }"))
        assert len(diags) == 1

    def test_declared(self):
        assert check_undeclared_variables(_doc(VALID)) == []


# ---------------------------------------------------------------------------
# check_when_variables
# ---------------------------------------------------------------------------


class TestCheckWhenVariables:
    def test_unknown_when_variable_is_error(self):
        text = "component A() {\n  when $mode == x { a: b; }\n}"
        diags = check_when_variables(_doc(text))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert (diags[0].line, diags[0].column) == (2, 3)

    def test_declared_when_variable(self):
        assert check_when_variables(_doc(VALID)) == []


# ---------------------------------------------------------------------------
# check_declarations
# ---------------------------------------------------------------------------


class TestCheckDeclarations:
    def test_missing_colon(self):
        diags = check_declarations(_doc("component A() { color red; }"))
        assert len(diags) == 1
        assert "Malformed CSS rule 'color red'" in diags[0].message

    def test_empty_value(self):
        diags = check_declarations(_doc("component A() {\n  .root { color: ; }\n}"))
        assert len(diags) == 1
        assert "Empty value for property 'color'" in diags[0].message
        assert diags[0].line == 2

    def test_well_formed(self):
        assert check_declarations(_doc(VALID)) == []


# ---------------------------------------------------------------------------
# Instance rules
# ---------------------------------------------------------------------------


class TestCheckInstanceComponents:
    def test_unknown_component_is_error(self):
        diags = check_instance_components(_doc("component A() { a: b; }\nB.x { }"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert (diags[0].line, diags[0].column) == (2, 1)

    def test_plain_css_file_not_checked(self):
        assert check_instance_components(_doc("B.x { color: red; }")) == []

    def test_unknown_component_with_imports_is_warning(self):
        text = '@import "lib";\ncomponent A() { a: b; }\nB.x { }'
        diags = check_instance_components(_doc(text))
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING

    def test_plain_css_import_does_not_soften(self):
        text = '@import "theme.css";\ncomponent A() { a: b; }\nB.x { }'
        diags = check_instance_components(_doc(text))
        assert diags[0].severity is Severity.ERROR


class TestCheckInstanceProperties:
    def test_unknown_property_warning(self):
        diags = check_instance_properties(_doc("component A($p: 1) { a: $p; }\nA.x { $q: 2; }"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert "unknown prop '$q'" in diags[0].message
        assert (diags[0].line, diags[0].column) == (2, 7)

    def test_known_property(self):
        assert check_instance_properties(_doc(VALID)) == []


class TestCheckRequiredParameters:
    def test_missing_required_value(self):
        diags = check_required_parameters(_doc("component A($p) { a: $p; }\nA.x { }"))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert "$p" in diags[0].message
        assert "A.x" in diags[0].message

    def test_supplied(self):
        assert check_required_parameters(_doc("component A($p) { a: $p; }\nA.x { $p: 1; }")) == []


# ---------------------------------------------------------------------------
# analyze / analyze_or_raise
# ---------------------------------------------------------------------------


class TestAnalyze:
    def test_valid_source_has_no_diagnostics(self):
        assert analyze(VALID) == []

    def test_errors_sorted_before_warnings(self):
        text = "component A() { a: $warn; }\n\n.b {"
        diags = analyze(text)
        assert [d.severity for d in diags] == [Severity.ERROR, Severity.WARNING]

    def test_sorted_by_line_then_column(self):
        text = "}\n} }"
        diags = analyze(text)
        assert [(d.line, d.column) for d in diags] == [(1, 1), (2, 1), (2, 3)]

    def test_all_defects_collected(self):
        text = "component A($x, $x) { color: ; }\nA.y { }\nZ.q { }"
        rules = {d.rule for d in analyze(text) if d.is_error}
        assert {
            "check_duplicate_parameters",
            "check_declarations",
            "check_instance_components",
            "check_required_parameters",
        } <= rules

    def test_extra_rules(self):
        def custom(doc):
            return [Diagnostic(rule="custom", severity=Severity.WARNING, message="hi")]

        diags = analyze(VALID, extra_rules=[custom])
        assert [d.rule for d in diags] == ["custom"]

    def test_diagnostic_str(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="boom", line=3, column=7)
        assert str(d) == "ERROR: boom (3:7)"


class TestAnalyzeOrRaise:
    def test_raises_with_aggregated_message(self):
        with pytest.raises(CompileError) as excinfo:
            analyze_or_raise("a {\n}\n}\n.b {")
        message = str(excinfo.value)
        assert message.startswith("Syntax errors found:")
        assert "(3:1)" in message
        assert "(4:4)" in message
        assert len(excinfo.value.diagnostics) == 2

    def test_returns_warnings(self):
        warnings = analyze_or_raise("component A() { a: $w; }")
        assert len(warnings) == 1
        assert warnings[0].is_warning
