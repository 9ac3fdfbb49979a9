"""Validator: an ordered chain of rules bound to one subject.

Contract:
    - validate() reads subject.value exactly once
    - rules run in insertion order; the first failure stops the chain
    - exactly one style hook on the subject is called per validate()
    - failure is a None return, never an exception
"""

from typing import Optional

import structlog

from formguard.validators.rules import Rule
from formguard.validators.subject import Subject

logger = structlog.get_logger()


class Validator:
    """Runs its rules against the subject's current value."""

    def __init__(self, subject: Subject, rules: Optional[list[Rule]] = None):
        self._subject = subject
        self._rules: list[Rule] = list(rules or [])

    @property
    def subject(self) -> Subject:
        return self._subject

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: Rule) -> "Validator":
        """Append a rule to the end of the chain."""
        self._rules.append(rule)
        return self

    def validate(self) -> Optional[str]:
        """Return the subject's value if every rule passes, else None."""
        value = self._subject.value

        for rule in self._rules:
            if not rule.test(value):
                logger.debug(
                    "rule_failed",
                    rule=rule.name,
                    label=self._subject.label,
                )
                self._subject.set_error_style(rule.message)
                return None

        self._subject.set_valid_style()
        return value

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"Validator(label={self._subject.label!r}, rules=[{names}])"
