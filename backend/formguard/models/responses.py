"""API response models."""

from pydantic import BaseModel
from typing import Literal


class FormSummaryResponse(BaseModel):
    """One entry in the form catalog listing."""

    name: str
    title: str
    field_count: int


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    forms_loaded: int
