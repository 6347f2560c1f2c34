"""
Roster API - Field Validators
==============================

What:  Per-field validation rules for path parameters and JSON bodies.
Why:   Input is checked before any database access, and the client gets the
       complete list of violations in one response.
How:   A FieldRules entry names a field and an ordered chain of Rule values.
       validate() runs every chain independently and collects all failures.
Who:   Used by the student routes through the rule sets defined below.

Rule primitives:
    required(msg)        value present, not None, not ""; stops the chain
    optional()           absent/None → skip the rest of the chain silently
    is_string(msg)       value is a str
    max_length(n, msg)   str of at most n characters
    exact_length(n, msg) str of exactly n characters
    is_decimal(msg)      1-3 ASCII digits, nothing else (JSON integers accepted)

All functions here are pure.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, NamedTuple, Sequence

from app.errors import FieldError

_CHECK = "check"
_REQUIRED = "required"
_OPTIONAL = "optional"

_DECIMAL_RE = re.compile(r"[0-9]{1,3}")


class Rule(NamedTuple):
    check: Callable[[Any], bool]
    message: str
    kind: str = _CHECK


@dataclass(frozen=True)
class FieldRules:
    field: str
    rules: Sequence[Rule]


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _is_absent(value: Any) -> bool:
    return value is None


# ── Rule primitives ───────────────────────────────────────────────────────

def required(message: str) -> Rule:
    return Rule(_is_present, message, _REQUIRED)


def optional() -> Rule:
    return Rule(lambda value: not _is_absent(value), "", _OPTIONAL)


def is_string(message: str) -> Rule:
    return Rule(lambda value: isinstance(value, str), message)


def max_length(limit: int, message: str) -> Rule:
    return Rule(lambda value: isinstance(value, str) and len(value) <= limit, message)


def exact_length(length: int, message: str) -> Rule:
    return Rule(lambda value: isinstance(value, str) and len(value) == length, message)


def _decimal_text(value: Any) -> bool:
    # bool is an int subclass; True must not pass as 1
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        value = str(value)
    return isinstance(value, str) and _DECIMAL_RE.fullmatch(value) is not None


def is_decimal(message: str) -> Rule:
    return Rule(_decimal_text, message)


# ── Evaluation ────────────────────────────────────────────────────────────

def validate(
    rule_sets: Sequence[FieldRules],
    values: Mapping[str, Any],
    location: str = "body",
) -> List[FieldError]:
    """
    Run every field's rule chain and return all failures.

    What:    Evaluates each FieldRules independently against values.
    Returns: Every FieldError found, in rule-set order. An empty list means
             the input is valid. A message is reported at most once per field.
    """
    errors: List[FieldError] = []
    for field_rules in rule_sets:
        value = values.get(field_rules.field)
        seen = set()
        for rule in field_rules.rules:
            if rule.kind == _OPTIONAL:
                if not rule.check(value):
                    break
                continue
            if rule.check(value):
                continue
            if rule.message not in seen:
                seen.add(rule.message)
                errors.append(FieldError(field_rules.field, rule.message, location))
            if rule.kind == _REQUIRED:
                break
    return errors


# ══════════════════════════════════════════════════════════════════════════
# Student rule sets
# ══════════════════════════════════════════════════════════════════════════

NAME_MESSAGE = "Name must be a string with a maximum length of 30 characters"
TITLE_MESSAGE = "Title must be a string with a maximum length of 25 characters"
CLASS_MESSAGE = "Class must be a string with a maximum length of 5 characters"
SECTION_MESSAGE = "Section must be a single character"
ROLLID_MESSAGE = "RollID must be a decimal with up to 3 digits"

NAME_RULES = FieldRules("NAME", [
    required("Name is required"), is_string(NAME_MESSAGE), max_length(30, NAME_MESSAGE),
])
TITLE_RULES = FieldRules("TITLE", [
    required("Title is required"), is_string(TITLE_MESSAGE), max_length(25, TITLE_MESSAGE),
])

# PATCH: absent fields are skipped, present ones must still be valid values
OPTIONAL_NAME_RULES = FieldRules("NAME", [
    optional(), required("Name must not be empty"),
    is_string(NAME_MESSAGE), max_length(30, NAME_MESSAGE),
])
OPTIONAL_TITLE_RULES = FieldRules("TITLE", [
    optional(), required("Title must not be empty"),
    is_string(TITLE_MESSAGE), max_length(25, TITLE_MESSAGE),
])

STUDENT_CREATE_RULES = [
    NAME_RULES,
    TITLE_RULES,
    FieldRules("CLASS", [
        required("Class is required"), is_string(CLASS_MESSAGE), max_length(5, CLASS_MESSAGE),
    ]),
    FieldRules("SECTION", [
        required("Section is required"), is_string(SECTION_MESSAGE), exact_length(1, SECTION_MESSAGE),
    ]),
    FieldRules("ROLLID", [
        required("RollID is required"), is_decimal(ROLLID_MESSAGE),
    ]),
]

STUDENT_REPLACE_RULES = [NAME_RULES, TITLE_RULES]

STUDENT_PATCH_RULES = [OPTIONAL_NAME_RULES, OPTIONAL_TITLE_RULES]

# Path parameters of /api/students/{class}/{section}/{rollid}
STUDENT_IDENTITY_RULES = [
    FieldRules("class", [is_string(CLASS_MESSAGE), max_length(5, CLASS_MESSAGE)]),
    FieldRules("section", [is_string(SECTION_MESSAGE), exact_length(1, SECTION_MESSAGE)]),
    FieldRules("rollid", [is_decimal(ROLLID_MESSAGE)]),
]
