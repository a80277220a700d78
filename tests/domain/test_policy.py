"""Tests for the password composition policy."""

import pytest

from pwctl.domain.policy import (
    RULE_MESSAGES,
    STRONG_MESSAGE,
    Rule,
    ValidationResult,
    check_rules,
    validate_password,
)


class TestRule:
    def test_priority_order(self) -> None:
        assert list(Rule) == [
            Rule.LENGTH,
            Rule.UPPERCASE,
            Rule.LOWERCASE,
            Rule.DIGIT,
            Rule.SPECIAL,
        ]

    def test_messages(self) -> None:
        assert Rule.LENGTH.message == "Password must be at least 8 characters long."
        assert Rule.UPPERCASE.message == "Password must contain at least one uppercase letter."
        assert Rule.LOWERCASE.message == "Password must contain at least one lowercase letter."
        assert Rule.DIGIT.message == "Password must contain at least one digit."
        assert Rule.SPECIAL.message == (
            "Password must contain at least one special character (!@#$%^&*())."
        )

    def test_every_rule_has_message(self) -> None:
        assert set(RULE_MESSAGES) == set(Rule)


class TestValidatePassword:
    def test_strong(self) -> None:
        result = validate_password("Valid1Pass!")
        assert result.valid is True
        assert result.message == "Password is strong."
        assert result.rule is None

    def test_too_short(self) -> None:
        result = validate_password("short1!")
        assert result.valid is False
        assert result.rule is Rule.LENGTH
        assert "must be at least 8 characters long" in result.message

    def test_missing_uppercase(self) -> None:
        result = validate_password("alllower123!")
        assert result.rule is Rule.UPPERCASE
        assert "must contain at least one uppercase letter" in result.message

    def test_missing_lowercase(self) -> None:
        result = validate_password("ALLUPPER123!")
        assert result.rule is Rule.LOWERCASE

    def test_missing_digit(self) -> None:
        result = validate_password("NoDigitsHere!")
        assert result.rule is Rule.DIGIT
        assert "must contain at least one digit" in result.message

    def test_missing_special(self) -> None:
        result = validate_password("NoSpecial123")
        assert result.rule is Rule.SPECIAL
        assert "must contain at least one special character" in result.message

    def test_empty(self) -> None:
        assert validate_password("").rule is Rule.LENGTH

    def test_exactly_minimum_length(self) -> None:
        assert validate_password("Abcdef1!").valid is True

    def test_spaces_allowed(self) -> None:
        assert validate_password("pass Phrase 1!").valid is True


class TestShortCircuit:
    def test_length_reported_first(self) -> None:
        """'short' also lacks upper, digit and special; only length is reported."""
        result = validate_password("short")
        assert result.rule is Rule.LENGTH
        assert result.message == RULE_MESSAGES[Rule.LENGTH]

    def test_uppercase_before_digit(self) -> None:
        assert validate_password("lowercaseonly").rule is Rule.UPPERCASE

    def test_digit_before_special(self) -> None:
        assert validate_password("UpperLower").rule is Rule.DIGIT

    def test_deterministic(self) -> None:
        for pw in ("short", "Valid1Pass!", "NoSpecial123"):
            assert validate_password(pw) == validate_password(pw)


class TestUnicode:
    def test_non_ascii_classes_count(self) -> None:
        """Greek capital, Arabic-Indic digit, Latin lowercase."""
        assert validate_password("Ωmega٣!x").valid is True

    def test_length_counts_code_points(self) -> None:
        """Seven characters but nine UTF-8 bytes is still too short."""
        pw = "Ää1!aaa"
        assert len(pw.encode("utf-8")) > 8
        assert validate_password(pw).rule is Rule.LENGTH

    def test_superscript_is_not_decimal_digit(self) -> None:
        assert validate_password("Abcdefg²!").rule is Rule.DIGIT

    def test_titlecase_is_not_uppercase(self) -> None:
        assert validate_password("ǅabcdef1!").rule is Rule.UPPERCASE

    @pytest.mark.parametrize("ch", ["-", "_", "?", "~", "+", "§"])
    def test_other_punctuation_is_not_special(self, ch: str) -> None:
        assert validate_password(f"Abcdefg1{ch}").rule is Rule.SPECIAL


class TestCheckRules:
    def test_all_pass(self) -> None:
        assert all(check_rules("Valid1Pass!").values())

    def test_reports_every_rule(self) -> None:
        rules = check_rules("short")
        assert list(rules) == list(Rule)
        assert rules == {
            Rule.LENGTH: False,
            Rule.UPPERCASE: False,
            Rule.LOWERCASE: True,
            Rule.DIGIT: False,
            Rule.SPECIAL: False,
        }


class TestValidationResult:
    def test_passed(self) -> None:
        result = ValidationResult.passed()
        assert result.valid is True
        assert result.message == STRONG_MESSAGE

    def test_failed(self) -> None:
        result = ValidationResult.failed(Rule.DIGIT)
        assert result.valid is False
        assert result.rule is Rule.DIGIT
        assert result.message == Rule.DIGIT.message

    def test_frozen(self) -> None:
        result = ValidationResult.passed()
        with pytest.raises(Exception):
            result.valid = False  # type: ignore[misc]
