"""Field validation: rules chained into validators, plus a form-level engine.

Usage:
    from formguard.validators import Validator, non_empty, minimum_length

    validator = Validator(subject)
    validator.add_rule(non_empty("Email is empty."))
    validator.add_rule(minimum_length(5, "Minimum 5 characters."))
    value = validator.validate()  # None on the first failing rule
"""

from formguard.validators.composed import (
    code_validator,
    empty_value_validator,
    mobile_validator,
    password_validator,
)
from formguard.validators.engine import FormValidationEngine, form_engine
from formguard.validators.factory import build_validator
from formguard.validators.field import FieldSubject
from formguard.validators.models import (
    FieldDefinition,
    FieldResult,
    FieldStyle,
    FormDefinition,
    FormNotFoundError,
    FormReport,
    ValidatorKind,
)
from formguard.validators.rules import Rule, digits_only, minimum_length, non_empty, phone_format
from formguard.validators.subject import Subject
from formguard.validators.validator import Validator

__all__ = [
    "Rule",
    "non_empty",
    "minimum_length",
    "digits_only",
    "phone_format",
    "Subject",
    "Validator",
    "empty_value_validator",
    "password_validator",
    "mobile_validator",
    "code_validator",
    "FieldSubject",
    "build_validator",
    "FormValidationEngine",
    "form_engine",
    "FieldDefinition",
    "FieldResult",
    "FieldStyle",
    "FormDefinition",
    "FormNotFoundError",
    "FormReport",
    "ValidatorKind",
]
