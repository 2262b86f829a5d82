"""
FastAPI application entry point for the Startup Idea Validator.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from startup_validator.api.error_handlers import EXCEPTION_HANDLERS
from startup_validator.api.middleware import RequestTracingMiddleware
from startup_validator.api.routes import router
from startup_validator.config import settings
from startup_validator.logging_config import configure_logging

# Configure structured logging before anything logs
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown - report configuration state."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        primary_endpoint=settings.LYZR_API_ENDPOINT,
        primary_configured=settings.primary_configured,
        secondary_configured=settings.secondary_configured,
    )
    if not settings.primary_configured:
        logger.error("Primary agent credentials missing, /api/validate will fail")
    yield
    logger.info("Application shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    description="Relays startup-idea submissions to a hosted AI evaluation agent",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Request tracing middleware (added first so CORS wraps it)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["validation"])


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/api/health-check",
        "validate": "/api/validate",
        "secondary_validate": "/api/secondary-validate",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "startup_validator.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
