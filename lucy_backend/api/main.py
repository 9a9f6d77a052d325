"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (audit logging, CORS)
4. Exception handlers
5. Startup/shutdown events

Run with: lucy-backend  (or: uvicorn lucy_backend.api.main:app --reload)
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lucy_backend import __version__
from lucy_backend.api.routes import actions_router, chat_router, health_router, suggestions_router
from lucy_backend.core.audit import AuditMiddleware
from lucy_backend.core.config import get_settings
from lucy_backend.core.exceptions import LucyException, ValidationError
from lucy_backend.core.logging_config import get_logger, setup_logging


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup logs the effective configuration; shutdown runs after the
    server has stopped accepting connections and drained open streams.
    """
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info("Groq API key loaded")
    logger.info(
        f"Models: chat={settings.llm_model_chat}, "
        f"suggestions={settings.llm_model_suggestions}, "
        f"actions={settings.llm_model_actions}"
    )

    yield

    logger.info(f"{settings.app_name} shut down")


app = FastAPI(
    title="Lucy AI Backend",
    description="""
    Backend for Lucy, the assistant inside the Senti wallet app.

    - **Chat**: streamed replies over Server-Sent Events
    - **Suggestions**: short follow-up quick replies
    - **Action check**: detects send / deposit / swap requests
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.debug("Audit logging middleware enabled")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_origin_regex=settings.cors_origin_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(LucyException)
async def lucy_exception_handler(request: Request, exc: LucyException):
    """Handle all custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 validation errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or None
    message = first.get("msg", "Invalid request body")

    logger.debug(f"Request validation failed on {request.url.path}: {errors}")

    error = ValidationError(message, field=field)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Detailed error information is only included in development mode.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "details": str(exc) if settings.is_development() else None,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    )


# ============================================================
# Routers
# ============================================================

app.include_router(health_router)
app.include_router(chat_router)
app.include_router(suggestions_router)
app.include_router(actions_router)
