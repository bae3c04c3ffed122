"""Password evaluation endpoints.

Public endpoints for scoring passwords and describing the tier table.
Clients call /evaluate on each input change and render the returned
label and style class into their display target.
"""

import logging

from fastapi import APIRouter, Depends, Request

from entropy import ScoringEngine, log_evaluation_event, count_events_by_tier
from entropy.config import EVALUATE_RATE_LIMIT
from entropy.storage import StorageError
from api.dependencies import get_client_ip, get_engine, limiter
from api.models import EvaluateRequest, EvaluateResponse, StatsResponse, TierResponse


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Password Entropy"])


@router.post("/evaluate", response_model=EvaluateResponse)
@limiter.limit(EVALUATE_RATE_LIMIT)
def evaluate_password(
    request: Request,
    body: EvaluateRequest,
    engine: ScoringEngine = Depends(get_engine)
):
    """Estimate password entropy and its strength tier."""
    evaluation = engine.evaluate(body.password)

    try:
        log_evaluation_event(
            evaluation,
            password_length=len(body.password),
            source="api",
            source_ip=get_client_ip(request),
        )
    except StorageError as e:
        logger.warning("Could not write audit event: %s", e)

    return EvaluateResponse(
        entropy_bits=evaluation.entropy_bits,
        tier_index=evaluation.tier_index,
        label=evaluation.label,
        style_class=evaluation.style_class,
        display=engine.config.display,
    )


@router.get("/tiers", response_model=list[TierResponse])
async def list_tiers(engine: ScoringEngine = Depends(get_engine)):
    """List strength tiers from weakest to strongest."""
    return [TierResponse(**tier.as_dict()) for tier in engine.config.tiers]


@router.get("/stats", response_model=StatsResponse)
async def evaluation_stats():
    """Count logged evaluations per tier."""
    counts = count_events_by_tier()
    return StatsResponse(total=sum(counts.values()), by_tier=counts)
