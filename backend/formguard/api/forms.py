"""Forms API: list forms, get a definition, validate submissions."""

from fastapi import APIRouter, HTTPException

import structlog

from formguard.models.requests import ValidateFieldRequest, ValidateFormRequest
from formguard.models.responses import FormSummaryResponse
from formguard.validators.engine import form_engine
from formguard.validators.forms import get_all_forms, get_form
from formguard.validators.models import (
    FieldDefinition,
    FieldResult,
    FormDefinition,
    FormNotFoundError,
    FormReport,
)

logger = structlog.get_logger()

router = APIRouter()


def _get_form_or_404(name: str) -> FormDefinition:
    try:
        return get_form(name)
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/forms", response_model=list[FormSummaryResponse])
async def list_forms():
    """List every form in the catalog."""
    return [
        FormSummaryResponse(name=form.name, title=form.title, field_count=len(form.fields))
        for form in get_all_forms()
    ]


@router.get("/forms/{name}", response_model=FormDefinition)
async def get_form_definition(name: str):
    """Get a form's field definitions."""
    return _get_form_or_404(name)


@router.post("/forms/{name}/validate", response_model=FormReport)
async def validate_form(name: str, request: ValidateFormRequest):
    """Validate submitted values against a form.

    A form that fails validation still returns 200: the report says why.
    """
    form = _get_form_or_404(name)
    return form_engine.validate(form, request.values)


@router.post("/fields/validate", response_model=FieldResult)
async def validate_field(request: ValidateFieldRequest):
    """Validate a single value with one of the preconfigured validators."""
    field = FieldDefinition(
        name=request.label,
        label=request.label,
        kind=request.kind,
        min_length=request.min_length,
    )
    result = form_engine.validate_field(field, request.value)

    logger.debug("field_validated", label=request.label, kind=request.kind, valid=result.valid)

    return result
