"""
Field validation rules.

A rule set is an ordered list of (field, predicate, message) entries. Every
rule is evaluated, so a request with several problems gets all of them back
in one response.
"""

from typing import Any, Callable, NamedTuple

from email_validator import EmailNotValidError, validate_email

from .exceptions import FieldError, ValidationError


class FieldRule(NamedTuple):
    """A single check against one field of the input."""

    field: str
    predicate: Callable[[Any], bool]
    message: str


def collect_errors(data: dict[str, Any], rules: list[FieldRule]) -> list[FieldError]:
    """Evaluate every rule against ``data`` and return the violations in rule order."""
    errors: list[FieldError] = []
    for rule in rules:
        if not rule.predicate(data.get(rule.field)):
            errors.append(FieldError(msg=rule.message, param=rule.field))
    return errors


def validate_fields(data: dict[str, Any], rules: list[FieldRule]) -> None:
    """
    Validate ``data`` against ``rules``.

    Raises:
        ValidationError: listing every violated rule.
    """
    errors = collect_errors(data, rules)
    if errors:
        raise ValidationError(errors)


# ---------------------------------------------------------------------------
# Sanitizers
# ---------------------------------------------------------------------------

def normalize_email(value: Any) -> str:
    """Canonical form used for storage and uniqueness checks."""
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def trim(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def is_email(value: Any) -> bool:
    """Syntactic check only; no DNS or deliverability lookup."""
    if not isinstance(value, str) or not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def not_empty(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def min_length(n: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= n
    return check


def max_length(n: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, str) and len(value) <= n
    return check
