"""Prometheus metrics for the precompression pipeline."""

from prometheus_client import Counter, Gauge, Summary

file_compression_duration_seconds = Summary(
    "html_storage_file_compression_duration_seconds",
    "Duration of file compression operations",
)

relay_requests_total = Counter(
    "html_precompressor_relay_requests_total",
    "Total number of downstream relay calls",
    ["mode", "result"],
)

background_tasks_in_flight = Gauge(
    "html_precompressor_background_tasks_in_flight",
    "Number of detached compress-and-relay tasks still running",
)
