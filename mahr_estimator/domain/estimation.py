"""Mahr estimation engine - core business logic for the recommended range"""

import math
from typing import Any, Dict

from mahr_estimator.domain.models import (
    Breakdown,
    BrideProfile,
    BridePreference,
    CalculationResult,
    CityTier,
    GroomProfile,
    MahrType,
)
from mahr_estimator.domain.payments import round_half_up, split_payment

PREFERENCE_FACTORS: Dict[BridePreference, float] = {
    BridePreference.SUNNAH: 0.5,
    BridePreference.BALANCED: 1.5,
    BridePreference.GENEROUS: 3.0,
}

CITY_MULTIPLIERS: Dict[CityTier, float] = {
    CityTier.TIER1: 1.4,
    CityTier.TIER2: 1.0,
    CityTier.TIER3: 0.8,
}

# Weight of the formula-driven amount; the rest goes to the bride's average expectation
FORMULA_WEIGHT = 0.7
EXPECTATION_WEIGHT = 0.3

CONSERVATIVE_MULTIPLIER = 0.8
GENEROUS_MULTIPLIER = 1.3

# Ceiling on the aligned amount; keeps every headline tier a finite whole number
MAX_ALIGNED_AMOUNT = 1e15


def _amount(value: Any) -> float:
    """Coerce a monetary input to float; absent or malformed values count as zero"""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def preference_factor(preference: Any) -> float:
    """Multiplier for the bride's preference; anything unrecognized is balanced (1.5)"""
    return PREFERENCE_FACTORS[BridePreference(preference)]


def city_multiplier(city_tier: Any) -> float:
    """Cost-of-living multiplier; anything unrecognized is treated as tier2 (1.0)"""
    return CITY_MULTIPLIERS[CityTier(city_tier)]


def financial_adjustment(monthly_income: float, savings: float, debt_amount: float) -> float:
    """
    Signed fraction applied to the running amount for financial health.

    Brackets (highest threshold checked first, mutually exclusive per category):
    - Savings >= 6x income: +0.20, else >= 3x income: +0.10
    - Debt >= 6x income: -0.25, else >= 3x income: -0.10

    A savings bonus and a debt penalty can both apply; they are summed.
    """
    adjustment = 0.0

    # Savings bonus
    if savings >= 6 * monthly_income:
        adjustment += 0.20
    elif savings >= 3 * monthly_income:
        adjustment += 0.10

    # Debt penalty
    if debt_amount >= 6 * monthly_income:
        adjustment -= 0.25
    elif debt_amount >= 3 * monthly_income:
        adjustment -= 0.10

    return adjustment


def estimate(groom: GroomProfile, bride: BrideProfile) -> CalculationResult:
    """
    Main entry point: derive the conservative/fair/generous Mahr figures.

    Steps:
    1. Preference factor x monthly income = base
    2. Cost-of-living multiplier
    3. Savings/debt adjustment
    4. 70/30 blend with the bride's average expectation, floored at 0
    5. Headline tiers at 0.8x / 1x / 1.3x, rounded half-up
    6. Prompt/deferred split of the fair amount

    Total over its input: never raises, degenerate input yields zeros.
    Overflowing amounts are capped at MAX_ALIGNED_AMOUNT.
    """
    income = _amount(groom.monthly_income)
    savings = _amount(groom.savings)
    debt = _amount(groom.debt_amount)

    factor = preference_factor(bride.preference)
    initial_base = income * factor

    city_adjustment = city_multiplier(groom.city_tier)
    amount = initial_base * city_adjustment

    adjustment = financial_adjustment(income, savings, debt)
    adjusted_before_alignment = amount * (1 + adjustment)

    average_expectation = (_amount(bride.expected_min_mahr) + _amount(bride.expected_max_mahr)) / 2
    aligned = adjusted_before_alignment * FORMULA_WEIGHT + average_expectation * EXPECTATION_WEIGHT
    if math.isnan(aligned):
        aligned = 0.0
    aligned = min(max(aligned, 0.0), MAX_ALIGNED_AMOUNT)

    conservative = round_half_up(aligned * CONSERVATIVE_MULTIPLIER)
    fair = round_half_up(aligned)
    generous = round_half_up(aligned * GENEROUS_MULTIPLIER)

    prompt_percentage = int(_amount(bride.prompt_percentage))
    payment = split_payment(fair, MahrType(bride.mahr_type), prompt_percentage)

    return CalculationResult(
        conservative=conservative,
        fair=fair,
        generous=generous,
        breakdown=Breakdown(
            income=income,
            preference_factor=factor,
            base=initial_base,
            city_adjustment=city_adjustment,
            financial_adjustment=adjustment,
            adjusted_before_alignment=adjusted_before_alignment,
            average_expectation=average_expectation,
            final_aligned=aligned,
        ),
        prompt_amount=payment.prompt_amount,
        deferred_amount=payment.deferred_amount,
    )
