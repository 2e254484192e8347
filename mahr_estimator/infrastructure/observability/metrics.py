"""Prometheus metrics for monitoring estimates and advisory service health"""

from prometheus_client import Counter, Histogram

# Estimate metrics
estimate_counter = Counter(
    "mahr_estimate_total",
    "Total Mahr estimates computed",
    ["preference", "mahr_type"],
)

fair_amount_histogram = Histogram(
    "mahr_fair_amount",
    "Distribution of fair Mahr amounts (whole currency units)",
    buckets=[0, 1_000, 2_500, 5_000, 10_000, 25_000, 50_000, 100_000],
)

# Advisory metrics
advisory_latency_histogram = Histogram(
    "advisory_latency_seconds",
    "Advisory text service response time",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 15.0],
)

advisory_fallback_counter = Counter(
    "advisory_fallback_total",
    "Advisory requests answered with static fallback text",
    ["reason"],  # timeout | error
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_estimate(preference: str, mahr_type: str, fair: int) -> None:
    """Record estimate metrics for monitoring preference mix and amount distribution"""
    estimate_counter.labels(preference=preference, mahr_type=mahr_type).inc()
    fair_amount_histogram.observe(fair)
