"""
FastAPI API routes and endpoints.

- routes.py: Relay endpoints (POST /api/validate, POST /api/secondary-validate,
  GET /api/health-check)
- dependencies.py: Dependency injection for settings, prompt builder, agent transport
- models.py: API-specific response models
- error_handlers.py: Exception handlers for {"error": ...} responses
- middleware.py: Request tracing
"""

from startup_validator.api import dependencies, error_handlers, models
from startup_validator.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
