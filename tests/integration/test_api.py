"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from mahr_estimator.api.dependencies import get_advisory_provider
from mahr_estimator.api.main import create_app
from mahr_estimator.api.v1.schemas import MAX_AMOUNT
from mahr_estimator.domain.advisory import FALLBACK_NOTE, MISSING_CREDENTIALS_NOTE
from mahr_estimator.domain.exceptions import AdvisoryServiceError
from mahr_estimator.domain.models import AdvisoryNote


@pytest.fixture
def estimate_payload():
    """Balanced couple in a tier2 city"""
    return {
        "groom": {
            "monthly_income": 5000,
            "savings": 0,
            "monthly_expenses": 2000,
            "debt_amount": 0,
            "job_stability": "stable",
            "city_tier": "tier2",
            "currency": "USD",
        },
        "bride": {
            "expected_min_mahr": 5000,
            "expected_max_mahr": 7000,
            "preference": "balanced",
            "mahr_type": "prompt",
        },
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "mahr_estimate_total" in response.text


def test_request_id_header(client: TestClient):
    """Test every response carries a request id, echoing the caller's when given"""
    assert client.get("/health").headers["X-Request-ID"]
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_estimate_endpoint(client: TestClient, estimate_payload: dict):
    """Test POST /v1/estimate returns figures, split and breakdown"""
    response = client.post("/v1/estimate", json=estimate_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["currency"] == "USD"
    assert data["conservative"] == 5640
    assert data["fair"] == 7050
    assert data["generous"] == 9165
    assert data["prompt_amount"] == 7050
    assert data["deferred_amount"] == 0
    assert data["breakdown"]["preference_factor"] == 1.5
    assert data["breakdown"]["base"] == pytest.approx(7500)
    assert data["breakdown"]["average_expectation"] == pytest.approx(6000)
    assert data["breakdown"]["final_aligned"] == pytest.approx(7050)
    assert data["formatted"]["fair"] == "$7,050"


def test_estimate_endpoint_split(client: TestClient, estimate_payload: dict):
    """Test split payment is returned with both portions"""
    estimate_payload["bride"].update({"mahr_type": "split", "prompt_percentage": 25})

    data = client.post("/v1/estimate", json=estimate_payload).json()

    assert data["prompt_amount"] == 1763  # round(7050 * 0.25) = round(1762.5)
    assert data["prompt_amount"] + data["deferred_amount"] == data["fair"]


def test_estimate_endpoint_defaults(client: TestClient):
    """Test an empty body is a zero estimate, not an error"""
    response = client.post("/v1/estimate", json={})

    assert response.status_code == 200
    data = response.json()
    assert data["fair"] == 0
    assert data["formatted"]["fair"] == "$0"


def test_estimate_endpoint_unrecognized_categories(client: TestClient, estimate_payload: dict):
    """Test unknown category strings fall back to defaults"""
    estimate_payload["groom"]["city_tier"] = "capital"
    estimate_payload["bride"]["preference"] = "luxurious"

    data = client.post("/v1/estimate", json=estimate_payload).json()

    assert data["breakdown"]["preference_factor"] == 1.5
    assert data["breakdown"]["city_adjustment"] == 1.0
    assert data["fair"] == 7050


def test_estimate_endpoint_rejects_oversized_amounts(client: TestClient):
    """Test amounts beyond the accepted ceiling are rejected, not a server error"""
    response = client.post(
        "/v1/estimate",
        json={"groom": {"monthly_income": 1e308, "city_tier": "tier1"}, "bride": {"preference": "generous"}},
    )

    assert response.status_code == 422


def test_estimate_endpoint_accepts_ceiling_amount(client: TestClient):
    """Test the largest accepted income still produces a finite estimate"""
    response = client.post(
        "/v1/estimate",
        json={
            "groom": {"monthly_income": MAX_AMOUNT, "city_tier": "tier1"},
            "bride": {"expected_max_mahr": MAX_AMOUNT, "preference": "generous"},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["conservative"] <= data["fair"] <= data["generous"]
    assert data["prompt_amount"] == data["fair"]


def test_estimate_endpoint_rejects_negative_amounts(client: TestClient, estimate_payload: dict):
    """Test request validation gate for negative income"""
    estimate_payload["groom"]["monthly_income"] = -1

    response = client.post("/v1/estimate", json=estimate_payload)

    assert response.status_code == 422


def test_estimate_endpoint_rejects_out_of_range_percentage(client: TestClient, estimate_payload: dict):
    """Test prompt percentage must be within 0-100"""
    estimate_payload["bride"].update({"mahr_type": "split", "prompt_percentage": 120})

    response = client.post("/v1/estimate", json=estimate_payload)

    assert response.status_code == 422


def test_advisory_endpoint_without_credentials(client: TestClient, estimate_payload: dict):
    """Test advisory answers with static guidance when no key is configured"""
    response = client.post("/v1/advisory", json=estimate_payload)

    assert response.status_code == 200
    assert response.json() == {
        "explanation": MISSING_CREDENTIALS_NOTE.explanation,
        "cultural_note": MISSING_CREDENTIALS_NOTE.cultural_note,
        "negotiation_tip": MISSING_CREDENTIALS_NOTE.negotiation_tip,
    }


def test_advisory_endpoint_provider_failure(estimate_payload: dict):
    """Test provider failure is never surfaced to the caller"""

    class BrokenProvider:
        async def generate(self, groom, bride, result):
            raise AdvisoryServiceError("Gemini API error: 500")

    app = create_app()
    app.dependency_overrides[get_advisory_provider] = lambda: BrokenProvider()

    response = TestClient(app).post("/v1/advisory", json=estimate_payload)

    assert response.status_code == 200
    assert response.json()["explanation"] == FALLBACK_NOTE.explanation


def test_advisory_endpoint_uses_computed_result(estimate_payload: dict):
    """Test provider receives the same result /v1/estimate computes"""

    class EchoProvider:
        async def generate(self, groom, bride, result):
            return AdvisoryNote(
                explanation=f"fair={result.fair}",
                cultural_note=groom.currency,
                negotiation_tip=bride.preference.value,
            )

    app = create_app()
    app.dependency_overrides[get_advisory_provider] = lambda: EchoProvider()

    data = TestClient(app).post("/v1/advisory", json=estimate_payload).json()

    assert data == {"explanation": "fair=7050", "cultural_note": "USD", "negotiation_tip": "balanced"}


def test_options_endpoint(client: TestClient):
    """Test GET /v1/options lists currencies and choices"""
    response = client.get("/v1/options")

    assert response.status_code == 200
    data = response.json()
    assert data["currencies"] == ["USD", "GBP", "EUR", "AED", "SAR", "INR", "PKR"]
    assert [o["value"] for o in data["city_tier"]] == ["tier1", "tier2", "tier3"]
    assert [o["value"] for o in data["preference"]] == ["sunnah", "balanced", "generous"]
    assert [o["value"] for o in data["mahr_type"]] == ["prompt", "deferred", "split"]
    assert data["job_stability"][0]["description"] is None


def request_count(method: str, endpoint: str, status: str) -> float:
    """Observed request count for one label set of the duration histogram"""
    value = REGISTRY.get_sample_value(
        "http_request_duration_seconds_count",
        {"method": method, "endpoint": endpoint, "status": status},
    )
    return value or 0.0


def test_request_metrics_labelled_by_route(client: TestClient, estimate_payload: dict):
    """Test matched requests are recorded under their route template"""
    before = request_count("POST", "/v1/estimate", "200")

    client.post("/v1/estimate", json=estimate_payload)

    assert request_count("POST", "/v1/estimate", "200") == before + 1


def test_request_metrics_unknown_paths_share_one_label(client: TestClient):
    """Test unknown paths do not create a label per raw URL"""
    before = request_count("GET", "unmatched", "404")

    assert client.get("/v1/plans/123").status_code == 404
    assert client.get("/v1/plans/456").status_code == 404

    assert request_count("GET", "unmatched", "404") == before + 2
    assert request_count("GET", "/v1/plans/123", "404") == 0
