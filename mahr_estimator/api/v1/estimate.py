"""POST /v1/estimate - Mahr estimate endpoint"""

import time
from dataclasses import asdict
from fastapi import APIRouter, Request

from mahr_estimator.api.v1.schemas import BreakdownSchema, EstimateRequest, EstimateResponse
from mahr_estimator.api.dependencies import get_request_id
from mahr_estimator.domain.estimation import estimate
from mahr_estimator.infrastructure.observability.metrics import record_estimate
from mahr_estimator.infrastructure.observability.logging import log_estimate
from mahr_estimator.utils.currency import format_currency

router = APIRouter()


@router.post("/estimate", response_model=EstimateResponse)
def create_estimate(request_body: EstimateRequest, request: Request):
    """
    Compute the recommended Mahr range for a groom/bride pair.

    Flow:
    1. Map request profiles to domain profiles
    2. Run the estimation engine
    3. Format headline figures in the groom's currency
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    groom = request_body.groom.to_domain()
    bride = request_body.bride.to_domain()

    result = estimate(groom, bride)

    duration_ms = (time.time() - start_time) * 1000
    record_estimate(bride.preference.value, bride.mahr_type.value, result.fair)
    log_estimate(request_id, bride.preference.value, bride.mahr_type.value, result.fair, duration_ms)

    return EstimateResponse(
        currency=groom.currency,
        conservative=result.conservative,
        fair=result.fair,
        generous=result.generous,
        prompt_amount=result.prompt_amount,
        deferred_amount=result.deferred_amount,
        breakdown=BreakdownSchema(**asdict(result.breakdown)),
        formatted={
            "conservative": format_currency(result.conservative, groom.currency),
            "fair": format_currency(result.fair, groom.currency),
            "generous": format_currency(result.generous, groom.currency),
            "prompt_amount": format_currency(result.prompt_amount, groom.currency),
            "deferred_amount": format_currency(result.deferred_amount, groom.currency),
        },
    )
