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
licenses_created_total = Counter(
    "licenses_created_total",
    "Total licenses created",
)

licenses_claimed_total = Counter(
    "licenses_claimed_total",
    "Total licenses claimed",
)

licenses_activated_total = Counter(
    "licenses_activated_total",
    "Total licenses activated by a first authentication",
)

licenses_suspended_total = Counter(
    "licenses_suspended_total",
    "Total license suspensions",
)

licenses_deleted_total = Counter(
    "licenses_deleted_total",
    "Total licenses deleted",
)

license_authentications_total = Counter(
    "license_authentications_total",
    "Total evaluated license authentications",
    ["valid"],
)

# Account metrics
accounts_created_total = Counter(
    "accounts_created_total",
    "Total accounts created",
    ["rank"],
)

# Error metrics
operation_errors_total = Counter(
    "operation_errors_total",
    "Total failed license and account operations",
    ["operation", "code"],
)
