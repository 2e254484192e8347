"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from mahr_estimator.config import settings
from mahr_estimator.domain.models import (
    BrideProfile,
    BridePreference,
    CityTier,
    GroomProfile,
    JobStability,
    MahrType,
)

# Largest accepted monetary input; keeps every intermediate amount finite
MAX_AMOUNT = 1_000_000_000_000


class GroomProfileSchema(BaseModel):
    """Groom financial profile"""

    monthly_income: float = Field(0.0, ge=0, le=MAX_AMOUNT, description="Monthly income")
    savings: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    monthly_expenses: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    debt_amount: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    job_stability: str = Field(JobStability.STABLE.value, description="stable | contract | student")
    city_tier: str = Field(CityTier.TIER2.value, description="tier1 | tier2 | tier3")
    currency: str = Field(default_factory=lambda: settings.default_currency, min_length=1, max_length=8)

    def to_domain(self) -> GroomProfile:
        return GroomProfile(
            monthly_income=self.monthly_income,
            savings=self.savings,
            monthly_expenses=self.monthly_expenses,
            debt_amount=self.debt_amount,
            job_stability=JobStability(self.job_stability),
            city_tier=CityTier(self.city_tier),
            currency=self.currency.upper(),
        )


class BrideProfileSchema(BaseModel):
    """Bride preference profile"""

    expected_min_mahr: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    expected_max_mahr: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    preference: str = Field(BridePreference.BALANCED.value, description="sunnah | balanced | generous")
    mahr_type: str = Field(MahrType.PROMPT.value, description="prompt | deferred | split")
    prompt_percentage: int = Field(100, ge=0, le=100, description="Share paid immediately when split")

    def to_domain(self) -> BrideProfile:
        return BrideProfile(
            expected_min_mahr=self.expected_min_mahr,
            expected_max_mahr=self.expected_max_mahr,
            preference=BridePreference(self.preference),
            mahr_type=MahrType(self.mahr_type),
            prompt_percentage=self.prompt_percentage,
        )


class EstimateRequest(BaseModel):
    """Request body for POST /v1/estimate and POST /v1/advisory"""

    groom: GroomProfileSchema = Field(default_factory=GroomProfileSchema)
    bride: BrideProfileSchema = Field(default_factory=BrideProfileSchema)


class BreakdownSchema(BaseModel):
    """Audit trail of every intermediate factor"""

    income: float
    preference_factor: float
    base: float
    city_adjustment: float
    financial_adjustment: float
    adjusted_before_alignment: float
    average_expectation: float
    final_aligned: float


class EstimateResponse(BaseModel):
    """Response for POST /v1/estimate"""

    currency: str
    conservative: int
    fair: int
    generous: int
    prompt_amount: int
    deferred_amount: int
    breakdown: BreakdownSchema
    formatted: Dict[str, str]


class AdvisoryResponse(BaseModel):
    """Response for POST /v1/advisory"""

    explanation: str
    cultural_note: str
    negotiation_tip: str


class OptionSchema(BaseModel):
    """Single selectable choice"""

    value: str
    label: str
    description: Optional[str] = None


class OptionsResponse(BaseModel):
    """Response for GET /v1/options"""

    currencies: List[str]
    job_stability: List[OptionSchema]
    city_tier: List[OptionSchema]
    preference: List[OptionSchema]
    mahr_type: List[OptionSchema]
