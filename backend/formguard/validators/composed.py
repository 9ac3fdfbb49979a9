"""Preconfigured validators.

Each builder returns a plain Validator already loaded with a fixed rule
sequence. Rule order matters: callers surface only the first failing message.
"""

from formguard.validators.rules import digits_only, minimum_length, non_empty, phone_format
from formguard.validators.subject import Subject
from formguard.validators.validator import Validator


def empty_value_validator(subject: Subject) -> Validator:
    """Rejects a missing or empty value."""
    validator = Validator(subject)
    validator.add_rule(non_empty(f"{subject.label} is empty."))
    return validator


def password_validator(subject: Subject, min_length: int) -> Validator:
    validator = empty_value_validator(subject)
    validator.add_rule(minimum_length(min_length, f"Minimum {min_length} characters."))
    return validator


def mobile_validator(subject: Subject) -> Validator:
    validator = empty_value_validator(subject)
    validator.add_rule(phone_format("Wrong phone number."))
    return validator


def code_validator(subject: Subject, min_length: int) -> Validator:
    """Non-empty, at least ``min_length`` long, then digits only.

    The length message wins over the digits message when both would fail.
    """
    validator = empty_value_validator(subject)
    validator.add_rule(
        minimum_length(min_length, f"{subject.label} must have minimum {min_length} characters.")
    )
    validator.add_rule(digits_only("Please digits only."))
    return validator
