"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from entropy.config import MAX_PASSWORD_LENGTH


class EvaluateRequest(BaseModel):
    """Request model for password evaluation.

    An empty password is valid and scores 0 bits.
    """
    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH, description="Password to evaluate")


class EvaluateResponse(BaseModel):
    """Response model for password evaluation."""
    entropy_bits: float
    tier_index: int = Field(..., ge=0, le=5)
    label: str
    style_class: str
    display: str


class TierResponse(BaseModel):
    """One strength tier; tier 0 has no lower bound."""
    index: int
    label: str
    style_class: str
    lower_bound: Optional[float] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    blacklist_size: int


class StatsResponse(BaseModel):
    """Evaluation counts per tier label."""
    total: int
    by_tier: dict[str, int]
