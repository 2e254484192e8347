"""Gemini HTTP client for generating advisory text about an estimate"""

import json
import httpx
from mahr_estimator.domain.models import (
    AdvisoryNote,
    BridePreference,
    BrideProfile,
    CalculationResult,
    CityTier,
    GroomProfile,
    JobStability,
)
from mahr_estimator.domain.exceptions import AdvisoryServiceError
from mahr_estimator.config import settings

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "explanation": {"type": "STRING"},
        "culturalNote": {"type": "STRING"},
        "negotiationTip": {"type": "STRING"},
    },
    "required": ["explanation", "culturalNote", "negotiationTip"],
}


def build_prompt(groom: GroomProfile, bride: BrideProfile, result: CalculationResult) -> str:
    """Render the advisory prompt from both profiles and the computed figures"""
    return (
        "Context: A couple is using a Mahr Calculator.\n"
        f"Groom Profile: Income {groom.monthly_income} {groom.currency}, Savings {groom.savings}, "
        f"Debt {groom.debt_amount}, Stability: {JobStability(groom.job_stability).value}, City: {CityTier(groom.city_tier).value}.\n"
        f"Bride Profile: Expectation {bride.expected_min_mahr}-{bride.expected_max_mahr} {groom.currency}, "
        f"Preference: {BridePreference(bride.preference).value}.\n"
        f"Calculated Results: Conservative {result.conservative}, Fair {result.fair}, "
        f"Generous {result.generous}.\n\n"
        "Task: Provide a JSON response with:\n"
        '1. explanation: A polite 2-sentence explanation of why the "Fair" amount was calculated, '
        "referencing the income and expectations.\n"
        "2. culturalNote: A brief Islamic/Cultural insight regarding Mahr (e.g. ease vs security).\n"
        "3. negotiationTip: A soft tip for the groom/bride/families to discuss this if there is a gap.\n"
    )


class GeminiAdvisoryClient:
    """Client for the Gemini generateContent API"""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = base_url or settings.gemini_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def generate(
        self,
        groom: GroomProfile,
        bride: BrideProfile,
        result: CalculationResult,
    ) -> AdvisoryNote:
        """
        Ask the model for an explanation, a cultural note and a negotiation tip.

        Raises:
            AdvisoryServiceError: On missing key, timeout, HTTP errors, or malformed response
        """
        if not self.api_key:
            raise AdvisoryServiceError("Gemini API key is not configured")

        body = {
            "contents": [{"parts": [{"text": build_prompt(groom, bride, result)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/models/{self.model}:generateContent",
                    headers={"x-goog-api-key": self.api_key},
                    json=body,
                )
                response.raise_for_status()
                data = response.json()

                text = data["candidates"][0]["content"]["parts"][0]["text"]
                if not text:
                    raise AdvisoryServiceError("No response text from Gemini")

                payload = json.loads(text)
                fields = [payload[key] for key in ("explanation", "culturalNote", "negotiationTip")]
                if not all(isinstance(value, str) and value.strip() for value in fields):
                    raise AdvisoryServiceError("Gemini returned empty or non-text advisory fields")

                explanation, cultural_note, negotiation_tip = fields
                return AdvisoryNote(
                    explanation=explanation,
                    cultural_note=cultural_note,
                    negotiation_tip=negotiation_tip,
                )

            except httpx.TimeoutException as e:
                raise AdvisoryServiceError(f"Gemini API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise AdvisoryServiceError(f"Gemini API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise AdvisoryServiceError(f"Gemini API unreachable: {e}") from e
            except (KeyError, IndexError, ValueError, TypeError) as e:
                raise AdvisoryServiceError(f"Invalid advisory data from Gemini: {e}") from e
