"""Prometheus metrics for monitoring approval rates, offered amounts and request latency"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_identity_code | invalid_loan_amount | invalid_loan_period | no_valid_loan
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts in euros",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

period_extension_counter = Counter(
    "loan_period_extension_total",
    "Offers made for a longer period than requested",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(
    outcome: str,
    requested_period: int,
    approved_amount: Optional[int] = None,
    approved_period: Optional[int] = None,
) -> None:
    """Record decision metrics for monitoring approval rates and offer distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if approved_amount is None:
        return

    approved_amount_histogram.observe(approved_amount)
    if approved_period is not None and approved_period > requested_period:
        period_extension_counter.inc()
