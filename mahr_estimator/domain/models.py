"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum


class JobStability(str, Enum):
    """Employment stability (informational, not used by the formula)"""

    STABLE = "stable"
    CONTRACT = "contract"
    STUDENT = "student"

    @classmethod
    def _missing_(cls, value):
        return cls.STABLE


class CityTier(str, Enum):
    """Cost-of-living bracket"""

    TIER1 = "tier1"  # High cost of living (e.g. London, NYC, Dubai)
    TIER2 = "tier2"  # Medium (e.g. Manchester, Dallas)
    TIER3 = "tier3"  # Low

    @classmethod
    def _missing_(cls, value):
        return cls.TIER2


class BridePreference(str, Enum):
    """Qualitative preference for the size of the Mahr"""

    SUNNAH = "sunnah"  # Simplicity, ease
    BALANCED = "balanced"  # Market average
    GENEROUS = "generous"  # High standard

    @classmethod
    def _missing_(cls, value):
        return cls.BALANCED


class MahrType(str, Enum):
    """Payment structure of the Mahr"""

    PROMPT = "prompt"  # Paid at the time of Nikah
    DEFERRED = "deferred"  # Paid at a later agreed date
    SPLIT = "split"  # Part now, part later

    @classmethod
    def _missing_(cls, value):
        return cls.PROMPT


@dataclass(frozen=True)
class GroomProfile:
    """Groom's financial situation, amounts in `currency`"""

    monthly_income: float = 0.0
    savings: float = 0.0
    monthly_expenses: float = 0.0  # Collected but not used by the formula
    debt_amount: float = 0.0
    job_stability: JobStability = JobStability.STABLE
    city_tier: CityTier = CityTier.TIER2
    currency: str = "USD"


@dataclass(frozen=True)
class BrideProfile:
    """Bride's stated expectations and payment preference"""

    expected_min_mahr: float = 0.0
    expected_max_mahr: float = 0.0
    preference: BridePreference = BridePreference.BALANCED
    mahr_type: MahrType = MahrType.PROMPT
    prompt_percentage: int = 100  # 0-100, only meaningful for split


@dataclass(frozen=True)
class Breakdown:
    """Every intermediate quantity used to derive the fair amount"""

    income: float
    preference_factor: float
    base: float
    city_adjustment: float
    financial_adjustment: float
    adjusted_before_alignment: float
    average_expectation: float
    final_aligned: float


@dataclass(frozen=True)
class PaymentSplit:
    """Prompt and deferred portions, always summing to the fair amount"""

    prompt_amount: int
    deferred_amount: int


@dataclass(frozen=True)
class CalculationResult:
    """Output of the estimation engine"""

    conservative: int
    fair: int
    generous: int
    breakdown: Breakdown
    prompt_amount: int
    deferred_amount: int


@dataclass(frozen=True)
class AdvisoryNote:
    """Short advisory texts accompanying a calculation"""

    explanation: str
    cultural_note: str
    negotiation_tip: str
