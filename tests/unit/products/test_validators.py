"""Unit tests for the Product request rules.

Covers:
- Individual predicates and their coercions.
- ``validate``: every rule runs, errors keep declaration order.
- ``validate_request``: per-action rule sets and error counts.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.validators import (
    BODY,
    FieldError,
    FieldRules,
    Rule,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    not_empty,
    validate,
    validate_request,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# Predicates
# ===========================================================================


class TestIsInt:
    @pytest.mark.parametrize("value", ["1", "2000", "-3", "+4", "0", "01", "007", 7])
    def test_accepts_integers(self, value):
        assert is_int(value) is True

    @pytest.mark.parametrize("value", ["invalid-id", "1.5", "", " 1", "1a", None, True, 1.0])
    def test_rejects_everything_else(self, value):
        assert is_int(value) is False


class TestNotEmpty:
    @pytest.mark.parametrize("value", ["x", 0, False, 12.5, [1]])
    def test_present_values(self, value):
        assert not_empty(value) is True

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_empty_values(self, value):
        assert not_empty(value) is False


class TestIsNumeric:
    @pytest.mark.parametrize("value", [1, 0, -5, 12.5, Decimal("3.10"), "12", "-1.5", ".5"])
    def test_numbers(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize(
        "value", ["hello", "", "1e3", "1.", True, None, float("nan"), float("inf"), [1]]
    )
    def test_non_numbers(self, value):
        assert is_numeric(value) is False


class TestIsPositive:
    @pytest.mark.parametrize("value", [1, 0.01, "5", " 7 ", Decimal("0.5"), "1e3"])
    def test_positive(self, value):
        assert is_positive(value) is True

    @pytest.mark.parametrize("value", [0, -1, "0", "-2", "hello", None, True, float("inf")])
    def test_not_positive(self, value):
        assert is_positive(value) is False


class TestIsBoolean:
    @pytest.mark.parametrize("value", [True, False, "true", "false", "1", "0", 1, 0])
    def test_booleans(self, value):
        assert is_boolean(value) is True

    @pytest.mark.parametrize("value", ["yes", "True", 2, None, "", 0.0])
    def test_non_booleans(self, value):
        assert is_boolean(value) is False


# ===========================================================================
# validate
# ===========================================================================


class TestValidate:
    def test_runs_every_rule_of_a_chain(self):
        rules = (
            FieldRules(
                "price",
                BODY,
                (Rule(is_numeric, "first"), Rule(not_empty, "second")),
            ),
        )
        assert validate(rules, body={}) == [
            FieldError("price", "first"),
            FieldError("price", "second"),
        ]

    def test_errors_follow_declaration_order(self):
        rules = (
            FieldRules("b", BODY, (Rule(not_empty, "b missing"),)),
            FieldRules("a", BODY, (Rule(not_empty, "a missing"),)),
        )
        errors = validate(rules, body={})
        assert [e.field for e in errors] == ["b", "a"]

    def test_no_errors_for_valid_input(self):
        rules = (FieldRules("a", BODY, (Rule(not_empty, "a missing"),)),)
        assert validate(rules, body={"a": "x"}) == []

    def test_as_dict(self):
        assert FieldError("id", "Not Valid ID").as_dict() == {
            "field": "id",
            "message": "Not Valid ID",
        }


# ===========================================================================
# validate_request
# ===========================================================================


class TestValidateRequest:
    def test_create_empty_body_yields_four_errors(self):
        errors = validate_request("create", body={})
        assert len(errors) == 4
        assert [e.field for e in errors] == ["name", "price", "price", "price"]

    def test_update_empty_body_yields_five_errors(self):
        errors = validate_request("update", params={"id": "1"}, body={})
        assert len(errors) == 5
        assert errors[-1] == FieldError("availability", "Not Valid Availability Value")

    def test_update_invalid_id_comes_first(self):
        errors = validate_request(
            "update",
            params={"id": "invalid-id"},
            body={"name": "x", "price": 1, "availability": True},
        )
        assert errors == [FieldError("id", "Not Valid ID")]

    @pytest.mark.parametrize("action", ["retrieve", "partial_update", "destroy"])
    def test_id_only_actions(self, action):
        assert validate_request(action, params={"id": "abc"}) == [
            FieldError("id", "Not Valid ID")
        ]
        assert validate_request(action, params={"id": "12"}, body={"junk": 1}) == []

    def test_list_has_no_rules(self):
        assert validate_request("list") == []

    def test_non_mapping_body_counts_as_empty(self):
        assert len(validate_request("create", body=["name", "price"])) == 4

    def test_price_hello_yields_two_errors(self):
        errors = validate_request("create", body={"name": "x", "price": "hello"})
        assert [e.message for e in errors] == ["Not Valid Value", "Price Not Valid"]

    def test_zero_price_yields_positivity_error_only(self):
        errors = validate_request("create", body={"name": "x", "price": 0})
        assert errors == [FieldError("price", "Price Not Valid")]
