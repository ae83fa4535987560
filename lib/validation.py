# =============================================================================
# lib/validation.py - Declarative Field Validation
# =============================================================================
# A validation rule is a (location, field, predicate, message) tuple. Rules are
# declared as plain lists and evaluated by one function, evaluate_rules(),
# which checks every rule in declaration order and collects all violations.
#
# Usage:
#   rules = [
#       Rule("path", "id", is_int, "Invalid product ID"),
#       Rule("body", "price", is_positive, "Price must be greater than zero"),
#   ]
#   errors = evaluate_rules(rules, params={"id": "7"}, body={"price": 0})
#   # [{"location": "body", "field": "price", "value": 0, "msg": "..."}]
#
# This module has no web framework imports; app/validation.py adapts it to
# FastAPI requests.
# =============================================================================

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Literal

Location = Literal["path", "body"]

# Sentinel for "field not present in the request"
MISSING: Any = object()

# ASCII digits only; \d would also accept other Unicode decimal digits
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
NUMERIC_PATTERN = re.compile(r"[+-]?([0-9]*\.)?[0-9]+")
BOOLEAN_STRINGS = {"true", "false", "0", "1"}


# =============================================================================
# Predicates
# =============================================================================
# Each predicate receives the raw field value (or MISSING) and returns a bool.

def is_int(value: Any) -> bool:
    """Integer, or a string of decimal digits with an optional sign."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(INT_PATTERN.fullmatch(value))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def not_empty(value: Any) -> bool:
    """Present, not null, and not blank."""
    if value is MISSING or value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def is_numeric(value: Any) -> bool:
    """Finite number, or a string holding one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        if not NUMERIC_PATTERN.fullmatch(value):
            return False
    elif not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def is_positive(value: Any) -> bool:
    return is_numeric(value) and float(value) > 0


def is_boolean(value: Any) -> bool:
    """JSON boolean, or one of "true", "false", "0", "1"."""
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value in BOOLEAN_STRINGS


# =============================================================================
# Rules
# =============================================================================

@dataclass(frozen=True)
class Rule:
    """
    One field check.

    Attributes:
        location: Where the field lives ("path" or "body")
        field: Field name
        check: Predicate over the raw value
        message: Error message reported when the check fails
        optional: Skip the check when the field is absent
    """

    location: Location
    field: str
    check: Callable[[Any], bool]
    message: str
    optional: bool = False

    def failed(self, value: Any) -> bool:
        if value is MISSING and self.optional:
            return False
        return not self.check(value)


def evaluate_rules(
    rules: list[Rule],
    params: dict[str, Any] | None = None,
    body: dict[str, Any] | None = None,
) -> list[dict[str, Any]]:
    """
    Run every rule and collect the violations.

    Args:
        rules: Rules in declaration order
        params: Path parameters
        body: Parsed JSON body

    Returns:
        One error dict per failed rule, in declaration order.
        An empty list means the input is valid.
    """
    sources = {"path": params or {}, "body": body or {}}
    errors = []

    for rule in rules:
        value = sources[rule.location].get(rule.field, MISSING)
        if rule.failed(value):
            errors.append({
                "location": rule.location,
                "field": rule.field,
                "value": None if value is MISSING else value,
                "msg": rule.message,
            })

    return errors
