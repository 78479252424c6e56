"""
Prometheus metrics for the catalog admin service.

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

# Brand metrics
brands_created_total = Counter(
    "brands_created_total",
    "Total brands created",
)

brands_deleted_total = Counter(
    "brands_deleted_total",
    "Total brands deleted",
)

# Image lifecycle metrics
images_saved_total = Counter(
    "images_saved_total",
    "Total images written to disk and recorded",
    ["image_type"],
)

images_deleted_total = Counter(
    "images_deleted_total",
    "Total image metadata rows deleted",
    ["image_type"],
)

image_file_removal_failures_total = Counter(
    "image_file_removal_failures_total",
    "Image files that could not be removed during cleanup",
)
