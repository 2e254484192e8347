"""Prompt/deferred payment split for an agreed Mahr"""

from decimal import Decimal, ROUND_HALF_UP

from mahr_estimator.domain.models import MahrType, PaymentSplit


def round_half_up(value: float) -> int:
    """
    Round to the nearest whole unit, halves rounding away from zero (2.5 -> 3).

    Goes through the shortest decimal repr of the float, so values just below
    a half (0.49999999999999994) are not pushed over it.
    """
    return int(Decimal(repr(float(value))).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def split_payment(fair: int, mahr_type: MahrType, prompt_percentage: int = 100) -> PaymentSplit:
    """
    Split the fair amount into prompt and deferred portions.

    Requirements:
    - prompt: everything now, nothing deferred
    - deferred: nothing now, everything deferred
    - split: prompt share rounded, deferred portion absorbs the rounding remainder

    Args:
        fair: Fair Mahr amount in whole currency units
        mahr_type: Payment structure; unrecognized values behave as prompt
        prompt_percentage: Share paid immediately for split, clamped to [0, 100]

    Example:
        fair=17640, split at 40% -> prompt 7056, deferred 10584
    """
    mahr_type = MahrType(mahr_type)

    if mahr_type == MahrType.DEFERRED:
        return PaymentSplit(prompt_amount=0, deferred_amount=fair)

    if mahr_type == MahrType.SPLIT:
        percentage = min(max(prompt_percentage or 0, 0), 100)
        prompt_amount = round_half_up(fair * (percentage / 100))
        # Deferred portion absorbs remainder to ensure exact total
        return PaymentSplit(prompt_amount=prompt_amount, deferred_amount=fair - prompt_amount)

    return PaymentSplit(prompt_amount=fair, deferred_amount=0)
