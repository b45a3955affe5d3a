"""Required-field validation — presence/non-empty checks over inbound values.

Invariants:
    - Every violated rule is reported, in rule order (never only the first)
    - Purely syntactic: a value passes if it is a non-empty string
    - Whitespace-only strings are non-empty
"""

from dataclasses import dataclass
from typing import Any, Mapping

from gateway.core.errors import FieldViolation, RequestFieldsError

QUERY = "query"
BODY = "body"


@dataclass(frozen=True)
class FieldRule:
    """A required field: where it lives, its inbound name, the message on failure."""
    location: str
    name: str
    message: str


def is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def find_violations(
    rules: tuple[FieldRule, ...], values: Mapping[tuple[str, str], Any],
) -> list[FieldViolation]:
    """Return one FieldViolation per rule whose value is missing or empty.

    values is keyed by (location, name), e.g. ("query", "toLanguage").
    """
    violations = []
    for rule in rules:
        value = values.get((rule.location, rule.name))
        if not is_present(value):
            violations.append(FieldViolation(
                location=rule.location, path=rule.name,
                msg=rule.message, value=value,
            ))
    return violations


def require_fields(
    rules: tuple[FieldRule, ...], values: Mapping[tuple[str, str], Any],
) -> None:
    """Raise RequestFieldsError listing every violation, if any."""
    violations = find_violations(rules, values)
    if violations:
        raise RequestFieldsError(violations)
