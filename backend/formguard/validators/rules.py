"""Validation rules: a predicate over an optional string plus a failure message.

A Rule never touches the subject it is tested against. The factories below
produce the standard rules; anything else can be built directly:

    Rule(name="no_spaces", predicate=lambda v: v is not None and " " not in v)
"""

from typing import Callable, Optional

import regex
from pydantic import BaseModel, ConfigDict

Predicate = Callable[[Optional[str]], bool]

DIGIT_CHARACTERS = frozenset("0123456789")
PHONE_CHARACTERS = frozenset("0123456789+ .()-*#")

# One user-perceived character (extended grapheme cluster)
GRAPHEME = regex.compile(r"\X")


class Rule(BaseModel):
    """A single named check. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str
    predicate: Predicate
    message: Optional[str] = None

    def test(self, value: Optional[str]) -> bool:
        """True if the value passes this rule."""
        return bool(self.predicate(value))


def character_count(value: str) -> int:
    """Number of user-perceived characters, so "e" + combining accent counts once."""
    return len(GRAPHEME.findall(value))


# ── Standard rules ──

def _is_non_empty(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value != ""


def _only_characters(allowed: frozenset) -> Predicate:
    def check(value: Optional[str]) -> bool:
        if value is None:
            return False
        # "" passes: there is no character outside the allowed set
        return all(ch in allowed for ch in value)

    return check


def non_empty(message: Optional[str] = None) -> Rule:
    """Value is present and not the empty string."""
    return Rule(name="non_empty", predicate=_is_non_empty, message=message)


def minimum_length(min_length: int, message: Optional[str] = None) -> Rule:
    """Value is present and has at least ``min_length`` characters."""
    if min_length < 0:
        raise ValueError(f"min_length must be >= 0, got {min_length}")

    def check(value: Optional[str]) -> bool:
        if value is None:
            return False
        return character_count(value) >= min_length

    return Rule(name="minimum_length", predicate=check, message=message)


def digits_only(message: Optional[str] = None) -> Rule:
    """Value is present and contains ASCII digits only."""
    return Rule(name="digits_only", predicate=_only_characters(DIGIT_CHARACTERS), message=message)


def phone_format(message: Optional[str] = None) -> Rule:
    """Value is present and contains only digits and ``+ .()-*#``."""
    return Rule(name="phone_format", predicate=_only_characters(PHONE_CHARACTERS), message=message)
