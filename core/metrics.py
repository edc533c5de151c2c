"""
Prometheus metrics for the license service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License metrics
licenses_issued_total = Counter(
    "licenses_issued_total",
    "Total licenses issued",
)

licenses_extended_total = Counter(
    "licenses_extended_total",
    "Total licenses extended",
)

licenses_invalidated_total = Counter(
    "licenses_invalidated_total",
    "Total licenses invalidated by their owner",
)

license_checks_total = Counter(
    "license_checks_total",
    "Total public validity checks",
    ["result"],
)

# Account metrics
accounts_registered_total = Counter(
    "accounts_registered_total",
    "Total accounts registered",
)

logins_total = Counter(
    "logins_total",
    "Total login attempts",
    ["result"],
)
