"""Form validation models: field/form definitions, per-field results, report.

A form fails when any of its fields fails. Each failing field reports only
its first failing rule's message.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ValidatorKind(str, Enum):
    """Which preconfigured validator a field uses."""

    EMPTY = "empty"        # non_empty
    PASSWORD = "password"  # non_empty, minimum_length
    MOBILE = "mobile"      # non_empty, phone_format
    CODE = "code"          # non_empty, minimum_length, digits_only
    NONE = "none"          # no rules, always valid


class FieldStyle(str, Enum):
    """Last style the validator asked the field to show."""

    VALID = "valid"
    ERROR = "error"
    UNTOUCHED = "untouched"


class FormNotFoundError(KeyError):
    """Raised when a form name is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Form '{self.name}' not found"


class FieldDefinition(BaseModel):
    """One input field of a form."""

    name: str = Field(min_length=1)
    label: str
    kind: ValidatorKind = ValidatorKind.EMPTY
    min_length: Optional[int] = Field(default=None, ge=0)


class FormDefinition(BaseModel):
    """A named form: an ordered list of fields."""

    name: str = Field(min_length=1)
    title: str = ""
    fields: list[FieldDefinition] = Field(default_factory=list)

    @field_validator("fields")
    @classmethod
    def _unique_field_names(cls, fields: list[FieldDefinition]) -> list[FieldDefinition]:
        seen = set()
        for field in fields:
            if field.name in seen:
                raise ValueError(f"Duplicate field name: {field.name}")
            seen.add(field.name)
        return fields

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        for field in self.fields:
            if field.name == name:
                return field
        return None


class FieldResult(BaseModel):
    """Outcome of validating one field."""

    name: str
    label: str
    valid: bool
    value: Optional[str] = None  # Only set when valid
    message: Optional[str] = None
    style: FieldStyle = FieldStyle.UNTOUCHED

    model_config = {"use_enum_values": True}


class FormReport(BaseModel):
    """Complete validation report for one form submission."""

    form: str
    passed: bool
    fields: list[FieldResult] = Field(default_factory=list)
    errors: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="First failing message per invalid field",
    )
    summary: dict[str, int] = Field(
        default_factory=lambda: {"valid": 0, "invalid": 0},
        description="Count of fields by outcome",
    )
    verdict: str = ""

    @classmethod
    def build(cls, form: str, results: list[FieldResult]) -> "FormReport":
        """Build a report from field results, keeping their order."""
        errors = {r.name: r.message for r in results if not r.valid}
        summary = {"valid": len(results) - len(errors), "invalid": len(errors)}
        passed = not errors

        if passed:
            verdict = f"PASS: all {summary['valid']} field(s) valid."
        else:
            verdict = (
                f"FAIL: {summary['invalid']} of {len(results)} field(s) invalid "
                f"({', '.join(errors)})."
            )

        return cls(
            form=form,
            passed=passed,
            fields=results,
            errors=errors,
            summary=summary,
            verdict=verdict,
        )
