"""POST /v1/advisory - advisory text for an estimate"""

from fastapi import APIRouter, Depends

from mahr_estimator.api.v1.schemas import AdvisoryResponse, EstimateRequest
from mahr_estimator.api.dependencies import get_advisory_provider
from mahr_estimator.config import settings
from mahr_estimator.domain.advisory import AdvisoryProvider, get_advisory
from mahr_estimator.domain.estimation import estimate

router = APIRouter()


@router.post("/advisory", response_model=AdvisoryResponse)
async def create_advisory(
    request_body: EstimateRequest,
    provider: AdvisoryProvider = Depends(get_advisory_provider),
):
    """
    Generate explanation, cultural note and negotiation tip for an estimate.

    Separate from /v1/estimate so the numeric result is never held up by
    the text service. Always answers 200; failures yield static guidance.
    """
    groom = request_body.groom.to_domain()
    bride = request_body.bride.to_domain()
    result = estimate(groom, bride)

    note = await get_advisory(groom, bride, result, provider, timeout=settings.advisory_timeout_seconds)

    return AdvisoryResponse(
        explanation=note.explanation,
        cultural_note=note.cultural_note,
        negotiation_tip=note.negotiation_tip,
    )
