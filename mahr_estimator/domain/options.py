"""Supported currencies and labelled choices offered to the input form"""

from typing import Dict, List

from mahr_estimator.domain.models import BridePreference, CityTier, JobStability, MahrType

CURRENCIES: List[str] = ["USD", "GBP", "EUR", "AED", "SAR", "INR", "PKR"]

JOB_STABILITY_OPTIONS: List[Dict[str, str]] = [
    {"value": JobStability.STABLE.value, "label": "Stable Full-time"},
    {"value": JobStability.CONTRACT.value, "label": "Contract / Freelance"},
    {"value": JobStability.STUDENT.value, "label": "Student / Entry Level"},
]

CITY_TIER_OPTIONS: List[Dict[str, str]] = [
    {"value": CityTier.TIER1.value, "label": "Tier 1 (High Cost of Living)"},
    {"value": CityTier.TIER2.value, "label": "Tier 2 (Medium Cost of Living)"},
    {"value": CityTier.TIER3.value, "label": "Tier 3 (Low Cost of Living)"},
]

BRIDE_PREFERENCE_OPTIONS: List[Dict[str, str]] = [
    {
        "value": BridePreference.SUNNAH.value,
        "label": "Sunnah / Simple",
        "description": "Prioritizes ease of marriage.",
    },
    {
        "value": BridePreference.BALANCED.value,
        "label": "Balanced",
        "description": "Considers market standards and fairness.",
    },
    {
        "value": BridePreference.GENEROUS.value,
        "label": "Generous",
        "description": "Reflects high appreciation or status.",
    },
]

MAHR_TYPE_OPTIONS: List[Dict[str, str]] = [
    {
        "value": MahrType.PROMPT.value,
        "label": "Prompt (Mu'ajjal)",
        "description": "Paid in full at the time of Nikah.",
    },
    {
        "value": MahrType.DEFERRED.value,
        "label": "Deferred (Mu'akhkhar)",
        "description": "Paid at a later agreed date.",
    },
    {
        "value": MahrType.SPLIT.value,
        "label": "Split",
        "description": "Part prompt, part deferred.",
    },
]
