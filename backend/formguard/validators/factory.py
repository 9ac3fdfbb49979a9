"""Maps a field definition to the preconfigured validator for its kind."""

from typing import Optional

from formguard.config import Settings, get_settings
from formguard.validators.composed import (
    code_validator,
    empty_value_validator,
    mobile_validator,
    password_validator,
)
from formguard.validators.models import FieldDefinition, ValidatorKind
from formguard.validators.subject import Subject
from formguard.validators.validator import Validator


def build_validator(
    field: FieldDefinition,
    subject: Subject,
    settings: Optional[Settings] = None,
) -> Validator:
    """Build the validator for ``field`` bound to ``subject``.

    Raises:
        ValueError: If the kind is not known
    """
    settings = settings or get_settings()
    kind = ValidatorKind(field.kind)

    if kind == ValidatorKind.EMPTY:
        return empty_value_validator(subject)
    if kind == ValidatorKind.PASSWORD:
        min_length = field.min_length if field.min_length is not None else settings.DEFAULT_PASSWORD_MIN_LENGTH
        return password_validator(subject, min_length)
    if kind == ValidatorKind.MOBILE:
        return mobile_validator(subject)
    if kind == ValidatorKind.CODE:
        min_length = field.min_length if field.min_length is not None else settings.DEFAULT_CODE_LENGTH
        return code_validator(subject, min_length)
    if kind == ValidatorKind.NONE:
        return Validator(subject)

    raise ValueError(f"Unknown validator kind: {field.kind}")
