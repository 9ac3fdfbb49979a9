"""API request models."""

from pydantic import BaseModel, Field
from typing import Optional

from formguard.validators.models import ValidatorKind


class ValidateFormRequest(BaseModel):
    """Submitted values for a named form."""

    values: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Field values by field name; null or missing means no value",
        examples=[{"phone": "+1 (555) 123-4567", "password": "hunter22"}],
    )


class ValidateFieldRequest(BaseModel):
    """A single ad-hoc field to validate."""

    label: str = Field(..., min_length=1, max_length=200)
    kind: ValidatorKind = ValidatorKind.EMPTY
    min_length: Optional[int] = Field(default=None, ge=0, le=1000)
    value: Optional[str] = None
