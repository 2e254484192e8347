"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from mahr_estimator.config import settings
from mahr_estimator.domain.advisory import AdvisoryProvider, StaticAdvisoryProvider, MISSING_CREDENTIALS_NOTE
from mahr_estimator.infrastructure.clients.gemini import GeminiAdvisoryClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_advisory_provider() -> AdvisoryProvider:
    """Provide Gemini client when an API key is configured, static guidance otherwise"""
    if not settings.gemini_api_key:
        return StaticAdvisoryProvider(MISSING_CREDENTIALS_NOTE)
    return GeminiAdvisoryClient()
