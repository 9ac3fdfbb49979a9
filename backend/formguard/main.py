"""FormGuard HTTP service.

Serves the form catalog and validates submissions against it. Logging is
configured here, once, for the whole process.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from formguard.config import get_settings
from formguard.api.router import api_router
from formguard.validators.forms import load_forms

_settings = get_settings()

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if _settings.DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(_settings.LOG_LEVEL.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warm the form catalog before serving."""
    settings = get_settings()
    logger.info("app_starting", debug=settings.DEBUG, forms_dir=settings.FORMS_DIR)

    forms = load_forms()
    if not forms:
        # Lookups will 404 and /health reports degraded
        logger.warning("no_forms_loaded", forms_dir=settings.FORMS_DIR)

    logger.info("app_started", forms=len(forms))
    yield
    logger.info("app_stopped")


app = FastAPI(
    title="FormGuard",
    description=(
        "Rule-based form field validation. "
        "Each field runs an ordered chain of rules and reports "
        "the first failing rule's message."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Error mapping ──

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Log the failure and answer 500 without leaking details."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "Validation service failed unexpectedly.",
        },
    )


@app.exception_handler(ValueError)
async def bad_parameter_handler(request: Request, exc: ValueError):
    """Bad form definitions or validator parameters are the caller's fault."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Service info."""
    return {
        "name": "FormGuard",
        "version": "1.0.0",
        "description": "Rule-based form field validation",
        "docs": "/docs",
        "health": "/api/v1/health",
        "forms": "/api/v1/forms",
    }


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "formguard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
    )
