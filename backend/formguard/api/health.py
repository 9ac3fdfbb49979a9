"""Health check endpoint."""

import time
from fastapi import APIRouter

from formguard.models.responses import HealthResponse
from formguard.validators.forms import load_forms

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check: the service is degraded if no forms loaded."""
    forms_loaded = len(load_forms())

    return HealthResponse(
        status="healthy" if forms_loaded else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        forms_loaded=forms_loaded,
    )
