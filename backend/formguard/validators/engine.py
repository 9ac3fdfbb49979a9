"""Form Validation Engine: runs each field's validator and builds a report.

This is the main entry point for validating a submitted form. Every field
gets a fresh FieldSubject and validator, so nothing is shared between calls.

Usage:
    engine = FormValidationEngine()
    report = engine.validate(get_form("login"), {"phone": "+1 555", "password": "secret1"})
    if not report.passed:
        # Show report.errors next to the fields
"""

import time
from typing import Mapping, Optional

import structlog

from formguard.config import Settings, get_settings
from formguard.validators.factory import build_validator
from formguard.validators.field import FieldSubject
from formguard.validators.models import (
    FieldDefinition,
    FieldResult,
    FieldStyle,
    FormDefinition,
    FormReport,
)

logger = structlog.get_logger()


class FormValidationEngine:
    """Validates form submissions against form definitions."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def validate_field(self, field: FieldDefinition, value: Optional[str]) -> FieldResult:
        """Validate a single value against one field definition."""
        subject = FieldSubject(label=field.label, value=value)
        validator = build_validator(field, subject, self.settings)

        valid_value = validator.validate()
        valid = subject.style == FieldStyle.VALID

        return FieldResult(
            name=field.name,
            label=field.label,
            valid=valid,
            value=valid_value if valid else None,
            message=subject.error_message,
            style=subject.style,
        )

    def validate(self, form: FormDefinition, values: Mapping[str, Optional[str]]) -> FormReport:
        """Validate every field of ``form`` and produce a report.

        Args:
            form: The form definition
            values: Submitted values by field name; a missing name means None

        Returns:
            FormReport with per-field results in definition order
        """
        start_time = time.perf_counter()

        results: list[FieldResult] = []
        field_timings: dict[str, float] = {}

        for field in form.fields:
            f_start = time.perf_counter()
            results.append(self.validate_field(field, values.get(field.name)))
            field_timings[field.name] = round((time.perf_counter() - f_start) * 1000, 3)

        unknown = sorted(set(values) - {field.name for field in form.fields})
        if unknown:
            logger.debug("unknown_fields_ignored", form=form.name, fields=unknown)

        report = FormReport.build(form.name, results)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "form_validation_complete",
            form=form.name,
            passed=report.passed,
            summary=report.summary,
            duration_ms=round(total_duration, 2),
            field_timings=field_timings,
        )

        return report


# Module-level singleton
form_engine = FormValidationEngine()
