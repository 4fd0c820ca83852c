"""Prometheus metrics for monitoring registrations, rejections and request latency"""

from decimal import Decimal
from prometheus_client import Counter, Histogram

# Registration metrics
registration_counter = Counter(
    "time_deposit_registrations_total",
    "Total time deposits registered",
    ["customer"],  # new | existing
)

rejection_counter = Counter(
    "time_deposit_rejections_total",
    "Registrations rejected by business rules",
    ["reason"],  # account_conflict | duplicate_deposit | customer_race
)

principal_histogram = Histogram(
    "time_deposit_principal_amount",
    "Principal of registered deposits",
    buckets=[100, 1_000, 5_000, 10_000, 50_000, 100_000, 1_000_000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_registration(new_customer: bool, amount: Decimal) -> None:
    """Record a successful registration and its principal"""
    registration_counter.labels(customer="new" if new_customer else "existing").inc()
    principal_histogram.observe(float(amount))


def record_rejection(reason: str) -> None:
    """Record a registration rejected with a client error"""
    rejection_counter.labels(reason=reason).inc()
