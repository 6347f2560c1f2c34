"""
Roster API - Field Validator Unit Tests
========================================

What:  Rule primitives and the student rule sets.
Why:   Validation is the only thing standing between client input and the
       store; every rejected field must be named in the result.
"""

import pytest

from app.errors import FieldError
from app.validators import (
    NAME_MESSAGE,
    ROLLID_MESSAGE,
    SECTION_MESSAGE,
    STUDENT_CREATE_RULES,
    STUDENT_IDENTITY_RULES,
    STUDENT_PATCH_RULES,
    STUDENT_REPLACE_RULES,
    FieldRules,
    exact_length,
    is_decimal,
    max_length,
    optional,
    required,
    validate,
)


def fields_of(errors):
    return [e.field for e in errors]


class TestRulePrimitives:

    def test_required_rejects_missing_none_and_empty(self):
        rules = [FieldRules("X", [required("X is required")])]
        for values in ({}, {"X": None}, {"X": ""}):
            assert validate(rules, values) == [FieldError("X", "X is required", "body")]

    def test_required_stops_the_chain(self):
        rules = [FieldRules("X", [required("X is required"), max_length(2, "too long")])]
        assert [e.message for e in validate(rules, {})] == ["X is required"]

    def test_optional_skips_absent_value(self):
        rules = [FieldRules("X", [optional(), max_length(2, "too long")])]
        assert validate(rules, {}) == []
        assert validate(rules, {"X": None}) == []
        assert fields_of(validate(rules, {"X": "abc"})) == ["X"]

    def test_exact_length(self):
        rules = [FieldRules("S", [exact_length(1, "one char")])]
        assert validate(rules, {"S": "B"}) == []
        assert fields_of(validate(rules, {"S": "BC"})) == ["S"]

    @pytest.mark.parametrize("value", ["1", "12", "999", 7, 123])
    def test_is_decimal_accepts(self, value):
        assert validate([FieldRules("R", [is_decimal("bad")])], {"R": value}) == []

    @pytest.mark.parametrize(
        "value",
        ["1234", "12a", "-1", "1.5", "", "12\n", "\u0661\u0662", " 12", True, 1000, 1.5],
    )
    def test_is_decimal_rejects(self, value):
        assert fields_of(validate([FieldRules("R", [is_decimal("bad")])], {"R": value})) == ["R"]

    def test_location_is_reported(self):
        errors = validate([FieldRules("X", [required("X is required")])], {}, "params")
        assert errors[0].location == "params"


class TestStudentRuleSets:

    def test_valid_create_payload(self, student_payload):
        assert validate(STUDENT_CREATE_RULES, student_payload) == []

    def test_empty_create_payload_reports_every_field(self):
        errors = validate(STUDENT_CREATE_RULES, {})
        assert fields_of(errors) == ["NAME", "TITLE", "CLASS", "SECTION", "ROLLID"]
        assert errors[0].message == "Name is required"
        assert errors[4].message == "RollID is required"

    def test_all_failures_collected_across_fields(self, student_payload):
        payload = dict(student_payload, NAME="x" * 31, ROLLID="abc")
        errors = validate(STUDENT_CREATE_RULES, payload)
        assert errors == [
            FieldError("NAME", NAME_MESSAGE),
            FieldError("ROLLID", ROLLID_MESSAGE),
        ]

    def test_non_string_name_reported_once(self, student_payload):
        errors = validate(STUDENT_CREATE_RULES, dict(student_payload, NAME=5))
        assert errors == [FieldError("NAME", NAME_MESSAGE)]

    def test_boundary_lengths(self, student_payload):
        payload = dict(student_payload, NAME="n" * 30, TITLE="t" * 25, CLASS="c" * 5)
        assert validate(STUDENT_CREATE_RULES, payload) == []
        payload = dict(payload, CLASS="c" * 6, TITLE="t" * 26)
        assert fields_of(validate(STUDENT_CREATE_RULES, payload)) == ["TITLE", "CLASS"]

    def test_replace_requires_name_and_title(self):
        assert fields_of(validate(STUDENT_REPLACE_RULES, {"NAME": "Asha"})) == ["TITLE"]

    def test_patch_fields_are_optional(self):
        assert validate(STUDENT_PATCH_RULES, {}) == []
        assert validate(STUDENT_PATCH_RULES, {"TITLE": "Ms"}) == []

    def test_patch_rejects_empty_and_oversized_values(self):
        errors = validate(STUDENT_PATCH_RULES, {"NAME": "", "TITLE": "t" * 26})
        assert errors == [
            FieldError("NAME", "Name must not be empty"),
            FieldError("TITLE", "Title must be a string with a maximum length of 25 characters"),
        ]

    def test_identity_rules(self):
        path = {"class": "10A", "section": "B", "rollid": "12"}
        assert validate(STUDENT_IDENTITY_RULES, path, "params") == []

        errors = validate(STUDENT_IDENTITY_RULES, {"class": "TOOLONG", "section": "BB", "rollid": "x"}, "params")
        assert fields_of(errors) == ["class", "section", "rollid"]
        assert errors[1] == FieldError("section", SECTION_MESSAGE, "params")
