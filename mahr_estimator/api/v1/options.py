"""GET /v1/options - choices offered by the input form"""

from fastapi import APIRouter

from mahr_estimator.api.v1.schemas import OptionsResponse
from mahr_estimator.domain.options import (
    BRIDE_PREFERENCE_OPTIONS,
    CITY_TIER_OPTIONS,
    CURRENCIES,
    JOB_STABILITY_OPTIONS,
    MAHR_TYPE_OPTIONS,
)

router = APIRouter()


@router.get("/options", response_model=OptionsResponse)
def get_options():
    """Supported currencies and labelled enum choices"""
    return OptionsResponse(
        currencies=CURRENCIES,
        job_stability=JOB_STABILITY_OPTIONS,
        city_tier=CITY_TIER_OPTIONS,
        preference=BRIDE_PREFERENCE_OPTIONS,
        mahr_type=MAHR_TYPE_OPTIONS,
    )
