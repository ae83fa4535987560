# =============================================================================
# tests/test_validation.py - Validation Rule Engine Tests
# =============================================================================
# Unit tests for lib/validation.py:
# - Each predicate's accepted and rejected values
# - evaluate_rules() ordering, collection and optional rules
# =============================================================================

import pytest

from lib.validation import (
    MISSING,
    Rule,
    evaluate_rules,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    is_string,
    not_empty,
)


# =============================================================================
# Predicate Tests
# =============================================================================

class TestIsInt:
    """Test is_int predicate."""

    @pytest.mark.parametrize("value", [0, 7, -3, "1", "42", "-5", "+8", "007"])
    def test_accepts_integers(self, value):
        assert is_int(value) is True

    @pytest.mark.parametrize(
        "value",
        ["abc", "1.5", "", " 1", "1e3", "1\n", "\u0661", "\uff11", 1.0, True, None, MISSING],
    )
    def test_rejects_non_integers(self, value):
        assert is_int(value) is False


class TestIsString:
    """Test is_string predicate."""

    def test_accepts_strings(self):
        assert is_string("Monitor") is True
        assert is_string("") is True

    @pytest.mark.parametrize("value", [1, None, ["a"], MISSING])
    def test_rejects_other_types(self, value):
        assert is_string(value) is False


class TestNotEmpty:
    """Test not_empty predicate."""

    @pytest.mark.parametrize("value", ["Monitor", 0, False, 12.5])
    def test_accepts_present_values(self, value):
        assert not_empty(value) is True

    @pytest.mark.parametrize("value", ["", "   ", None, MISSING])
    def test_rejects_empty_values(self, value):
        assert not_empty(value) is False


class TestIsNumeric:
    """Test is_numeric predicate."""

    @pytest.mark.parametrize("value", [1, 0, -2, 3.5, "300", "12.50", ".5", "-1", "+4.25"])
    def test_accepts_numbers(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            True, False, None, "", "abc", "1e3", "5.", " 5", "\u0663", "0.\u0665",
            float("nan"), float("inf"), 10 ** 400, MISSING,
        ],
    )
    def test_rejects_non_numbers(self, value):
        assert is_numeric(value) is False


class TestIsPositive:
    """Test is_positive predicate."""

    @pytest.mark.parametrize("value", [1, 0.01, "300", "0.5"])
    def test_accepts_positive(self, value):
        assert is_positive(value) is True

    @pytest.mark.parametrize("value", [0, -1, "0", "-0.5", "abc", None, True])
    def test_rejects_non_positive(self, value):
        assert is_positive(value) is False


class TestIsBoolean:
    """Test is_boolean predicate."""

    @pytest.mark.parametrize("value", [True, False, "true", "false", "0", "1"])
    def test_accepts_booleans(self, value):
        assert is_boolean(value) is True

    @pytest.mark.parametrize("value", [1, 0, "yes", "True", None, MISSING])
    def test_rejects_non_booleans(self, value):
        assert is_boolean(value) is False


# =============================================================================
# evaluate_rules Tests
# =============================================================================

class TestEvaluateRules:
    """Test the rule engine."""

    @pytest.fixture
    def rules(self):
        return [
            Rule("path", "id", is_int, "Invalid product ID"),
            Rule("body", "name", not_empty, "Product name cannot be empty"),
            Rule("body", "price", is_numeric, "Invalid price value"),
            Rule("body", "price", is_positive, "Price must be greater than zero"),
        ]

    def test_valid_input_has_no_errors(self, rules):
        errors = evaluate_rules(rules, params={"id": "3"}, body={"name": "Monitor", "price": 300})

        assert errors == []

    def test_collects_all_errors_in_declaration_order(self, rules):
        errors = evaluate_rules(rules, params={"id": "x"}, body={"name": "", "price": "abc"})

        assert [error["msg"] for error in errors] == [
            "Invalid product ID",
            "Product name cannot be empty",
            "Invalid price value",
            "Price must be greater than zero",
        ]

    def test_error_shape(self, rules):
        errors = evaluate_rules(rules, params={"id": "1"}, body={"name": "Monitor", "price": -2})

        assert errors == [
            {
                "location": "body",
                "field": "price",
                "value": -2,
                "msg": "Price must be greater than zero",
            }
        ]

    def test_missing_field_reports_null_value(self, rules):
        errors = evaluate_rules(rules, params={"id": "1"}, body={"price": 1})

        assert errors[0]["field"] == "name"
        assert errors[0]["value"] is None

    def test_missing_sources_default_to_empty(self):
        rules = [Rule("path", "id", is_int, "Invalid product ID")]

        assert len(evaluate_rules(rules)) == 1

    def test_optional_rule_skipped_when_absent(self):
        rules = [Rule("body", "availability", is_boolean, "Invalid availability value", optional=True)]

        assert evaluate_rules(rules, body={}) == []

    def test_optional_rule_applied_when_present(self):
        rules = [Rule("body", "availability", is_boolean, "Invalid availability value", optional=True)]

        errors = evaluate_rules(rules, body={"availability": "maybe"})

        assert [error["msg"] for error in errors] == ["Invalid availability value"]

    def test_optional_rule_applied_to_explicit_null(self):
        """null is a value, not an absent field."""
        rules = [Rule("body", "availability", is_boolean, "Invalid availability value", optional=True)]

        assert len(evaluate_rules(rules, body={"availability": None})) == 1

    def test_path_and_body_are_separate(self):
        rules = [Rule("body", "id", is_int, "Invalid body id")]

        errors = evaluate_rules(rules, params={"id": "1"}, body={})

        assert len(errors) == 1
