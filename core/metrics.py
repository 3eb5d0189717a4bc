"""
Prometheus metrics for the KeyGuard service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "keyguard_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "keyguard_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License key metrics
license_keys_created_total = Counter(
    "license_keys_created_total",
    "Total license keys created",
    ["application_id"],
)

license_keys_updated_total = Counter(
    "license_keys_updated_total",
    "Total license keys updated",
)

license_keys_deleted_total = Counter(
    "license_keys_deleted_total",
    "Total license keys deleted",
)

license_key_status_toggles_total = Counter(
    "license_key_status_toggles_total",
    "Total license key activation toggles",
    ["is_active"],
)

license_key_validations_total = Counter(
    "license_key_validations_total",
    "Total license key validation requests",
    ["result"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
