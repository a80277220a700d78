"""Password composition policy.

Five rules, checked in fixed priority order. Validation short-circuits:
the first failing rule is the only one reported.

Letter and digit classes use Unicode general categories (``Lu``, ``Ll``,
``Nd``), so non-ASCII characters count. The special-character rule is an
explicit membership test against ``SPECIAL_CHARACTERS``.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel

from pwctl.domain.alphabet import MIN_LENGTH, SPECIAL_CHARACTERS

STRONG_MESSAGE = "Password is strong."


class Rule(StrEnum):
    """Composition rules in evaluation order."""

    LENGTH = "length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def message(self) -> str:
        return RULE_MESSAGES[self]


RULE_MESSAGES: dict[Rule, str] = {
    Rule.LENGTH: f"Password must be at least {MIN_LENGTH} characters long.",
    Rule.UPPERCASE: "Password must contain at least one uppercase letter.",
    Rule.LOWERCASE: "Password must contain at least one lowercase letter.",
    Rule.DIGIT: "Password must contain at least one digit.",
    Rule.SPECIAL: "Password must contain at least one special character (!@#$%^&*()).",
}


class ValidationResult(BaseModel):
    """Outcome of a policy check: strong, or exactly one violated rule."""

    model_config = {"frozen": True}

    valid: bool
    message: str
    rule: Rule | None = None

    @classmethod
    def passed(cls) -> ValidationResult:
        return cls(valid=True, message=STRONG_MESSAGE)

    @classmethod
    def failed(cls, rule: Rule) -> ValidationResult:
        return cls(valid=False, message=rule.message, rule=rule)


def _has_category(password: str, category: str) -> bool:
    return any(unicodedata.category(ch) == category for ch in password)


_CHECKS: dict[Rule, Callable[[str], bool]] = {
    Rule.LENGTH: lambda pw: len(pw) >= MIN_LENGTH,
    Rule.UPPERCASE: lambda pw: _has_category(pw, "Lu"),
    Rule.LOWERCASE: lambda pw: _has_category(pw, "Ll"),
    Rule.DIGIT: lambda pw: _has_category(pw, "Nd"),
    Rule.SPECIAL: lambda pw: any(ch in SPECIAL_CHARACTERS for ch in pw),
}


def check_rules(password: str) -> dict[Rule, bool]:
    """Evaluate every rule independently, in priority order."""
    return {rule: check(password) for rule, check in _CHECKS.items()}


def validate_password(password: str) -> ValidationResult:
    """Check *password* against the policy and return the first violation."""
    for rule, check in _CHECKS.items():
        if not check(password):
            return ValidationResult.failed(rule)
    return ValidationResult.passed()
