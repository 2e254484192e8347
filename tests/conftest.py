"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from mahr_estimator.api.main import create_app
from mahr_estimator.api.dependencies import get_advisory_provider
from mahr_estimator.domain.advisory import StaticAdvisoryProvider, MISSING_CREDENTIALS_NOTE
from mahr_estimator.domain.models import (
    BrideProfile,
    BridePreference,
    CityTier,
    GroomProfile,
    MahrType,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client that never reaches the network for advisory text"""
    app = create_app()
    app.dependency_overrides[get_advisory_provider] = lambda: StaticAdvisoryProvider(MISSING_CREDENTIALS_NOTE)
    return TestClient(app)


@pytest.fixture
def groom() -> GroomProfile:
    """Salaried groom in a medium cost-of-living city, no savings or debt"""
    return GroomProfile(
        monthly_income=5000,
        savings=0,
        monthly_expenses=2000,
        debt_amount=0,
        city_tier=CityTier.TIER2,
        currency="USD",
    )


@pytest.fixture
def bride() -> BrideProfile:
    """Balanced preference expecting 5000-7000, paid promptly"""
    return BrideProfile(
        expected_min_mahr=5000,
        expected_max_mahr=7000,
        preference=BridePreference.BALANCED,
        mahr_type=MahrType.PROMPT,
    )
