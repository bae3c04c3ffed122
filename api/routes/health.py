"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime

from fastapi import APIRouter, Depends

from entropy import ScoringEngine
from api.dependencies import get_engine
from api.models import HealthResponse


router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Password Entropy API"}


@router.get("/health", response_model=HealthResponse)
async def health_check(engine: ScoringEngine = Depends(get_engine)):
    """Detailed health check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        blacklist_size=len(engine.config.blacklist),
    )
