"""Prometheus metrics for the member proxy."""

from prometheus_client import Counter, Histogram

PROXY_REQUESTS = Counter(
    "memberproxy_proxy_requests_total",
    "Proxied member operations by outcome",
    labelnames=["operation", "outcome"],
)

AUTHORITY_LATENCY = Histogram(
    "memberproxy_authority_latency_seconds",
    "Round trip time of Member Authority calls",
    labelnames=["operation"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

AUDIT_APPEND_FAILURES = Counter(
    "memberproxy_audit_append_failures_total",
    "Audit entries that could not be persisted",
    labelnames=["operation"],
)
