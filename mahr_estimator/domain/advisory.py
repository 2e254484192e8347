"""
Advisory text accompanying an estimate.

The numeric result never depends on this module. Providers may fail;
`get_advisory` always answers, falling back to static guidance.
"""

import asyncio
import time
from typing import Protocol

from mahr_estimator.domain.models import AdvisoryNote, BrideProfile, CalculationResult, GroomProfile
from mahr_estimator.infrastructure.observability.logging import log_advisory_fallback
from mahr_estimator.infrastructure.observability.metrics import (
    advisory_fallback_counter,
    advisory_latency_histogram,
)

MISSING_CREDENTIALS_NOTE = AdvisoryNote(
    explanation=(
        "AI insights unavailable (API Key missing). "
        "The calculations above are based on standard financial ratios."
    ),
    cultural_note="Traditionally, Mahr is a gift to the bride and should be agreed upon with mutual kindness.",
    negotiation_tip="Open communication is key. Discuss expectations early.",
)

FALLBACK_NOTE = AdvisoryNote(
    explanation="Based on your financial inputs and local cost of living standards.",
    cultural_note="Mahr is a token of respect and security.",
    negotiation_tip="Focus on the barakah (blessing) in the marriage.",
)


class AdvisoryProvider(Protocol):
    """Anything that can turn profiles and a result into advisory text"""

    async def generate(
        self,
        groom: GroomProfile,
        bride: BrideProfile,
        result: CalculationResult,
    ) -> AdvisoryNote: ...


class StaticAdvisoryProvider:
    """Provider that always answers with the same note"""

    def __init__(self, note: AdvisoryNote = MISSING_CREDENTIALS_NOTE):
        self.note = note

    async def generate(
        self,
        groom: GroomProfile,
        bride: BrideProfile,
        result: CalculationResult,
    ) -> AdvisoryNote:
        return self.note


async def get_advisory(
    groom: GroomProfile,
    bride: BrideProfile,
    result: CalculationResult,
    provider: AdvisoryProvider,
    timeout: float,
) -> AdvisoryNote:
    """
    Fetch advisory text, never raising.

    Any provider failure (timeout, transport error, malformed content)
    is logged, counted and answered with FALLBACK_NOTE.
    """
    start_time = time.perf_counter()
    try:
        return await asyncio.wait_for(provider.generate(groom, bride, result), timeout=timeout)
    except asyncio.TimeoutError:
        advisory_fallback_counter.labels(reason="timeout").inc()
        log_advisory_fallback("timeout", f"no answer within {timeout}s")
        return FALLBACK_NOTE
    except Exception as e:
        advisory_fallback_counter.labels(reason="error").inc()
        log_advisory_fallback("error", str(e))
        return FALLBACK_NOTE
    finally:
        advisory_latency_histogram.observe(time.perf_counter() - start_time)
