"""Tests for the when-block evaluator."""

import pytest

from axcss.conditions import evaluate_condition, evaluate_whens
from axcss.errors import UnknownVariableError


# ---------------------------------------------------------------------------
# evaluate_condition
# ---------------------------------------------------------------------------


class TestEvaluateCondition:
    def test_equals_match(self):
        assert evaluate_condition("active", "==", "active") is True

    def test_equals_mismatch(self):
        assert evaluate_condition("idle", "==", "active") is False

    def test_not_equals(self):
        assert evaluate_condition("idle", "!=", "active") is True
        assert evaluate_condition("active", "!=", "active") is False

    def test_no_numeric_coercion(self):
        assert evaluate_condition("1.0", "==", "1") is False

    def test_unknown_operator(self):
        with pytest.raises(ValueError, match="Unknown operator"):
            evaluate_condition("a", "<", "b")


# ---------------------------------------------------------------------------
# evaluate_whens
# ---------------------------------------------------------------------------


class TestWhenIncluded:
    def test_equals_includes_block_content(self):
        out = evaluate_whens("when $s == on { a: b; } c: d;", {"s": "on"})
        assert "a: b;" in out
        assert "c: d;" in out
        assert "when" not in out
        assert "{" not in out

    def test_not_equals_includes_block_content(self):
        out = evaluate_whens("when $s != off { a: b; }", {"s": "on"})
        assert out.strip() == "a: b;"

    def test_quoted_literal(self):
        out = evaluate_whens('when $s == "on" { a: b; }', {"s": "on"})
        assert out.strip() == "a: b;"

    def test_quoted_literal_with_space(self):
        body = "when $s == \"a b\" { x: y; }"
        assert evaluate_whens(body, {"s": "a b"}).strip() == "x: y;"
        assert evaluate_whens(body, {"s": "a"}).strip() == ""

    def test_single_quoted_literal_with_space(self):
        out = evaluate_whens("when $s != 'a b' { x: y; }", {"s": "c"})
        assert out.strip() == "x: y;"

    def test_nested_rule_block_kept_intact(self):
        out = evaluate_whens("when $s == on { .root { opacity: 1; } }", {"s": "on"})
        assert out.strip() == ".root { opacity: 1; }"


class TestWhenExcluded:
    def test_equals_mismatch_removes_construct(self):
        out = evaluate_whens("when $s == on { a: b; } c: d;", {"s": "off"})
        assert "a: b;" not in out
        assert "when" not in out
        assert out.strip() == "c: d;"

    def test_not_equals_match_removes_construct(self):
        out = evaluate_whens("when $s != on { a: b; }", {"s": "on"})
        assert out.strip() == ""

    def test_string_exact_comparison(self):
        out = evaluate_whens("when $s == active { a: b; }", {"s": "Active"})
        assert out.strip() == ""


class TestWhenEdgeCases:
    def test_unknown_variable_raises(self):
        with pytest.raises(UnknownVariableError) as excinfo:
            evaluate_whens("when $missing == x { a: b; }", {"s": "on"})
        assert excinfo.value.name == "missing"

    def test_multiple_whens_in_order(self):
        body = "when $a == 1 { one: 1; } when $a == 2 { two: 2; } when $a != 3 { three: 3; }"
        out = evaluate_whens(body, {"a": "2"})
        assert "one" not in out
        assert out.index("two: 2;") < out.index("three: 3;")

    def test_nested_when_passes_through_unevaluated(self):
        body = "when $a == x { when $b == y { c: d; } }"
        out = evaluate_whens(body, {"a": "x", "b": "n"})
        assert "when $b == y" in out
        assert "c: d;" in out

    def test_header_without_block_is_left_alone(self):
        assert evaluate_whens("when $a == x;", {"a": "x"}) == "when $a == x;"

    def test_body_without_whens_unchanged(self):
        body = ".root { color: red; }"
        assert evaluate_whens(body, {}) == body
