"""API route modules."""

from api.routes.evaluate import router as evaluate_router
from api.routes.health import router as health_router

__all__ = ["evaluate_router", "health_router"]
