"""Prometheus metrics for the RozetkaPay client.

Registered on the default registry; expose them with the host application's
existing /metrics endpoint. Useful alert rules:
- rozetkapay_requests_total{outcome="failure"} (upstream errors)
- rozetkapay_requests_total{outcome="decode_error"} (response shape drift)
- rozetkapay_retries_total (transient instability upstream)
- rozetkapay_fallbacks_total (legacy endpoints still in use)
"""

from prometheus_client import Counter, Histogram

# === Request Metrics ===

requests_total = Counter(
    "rozetkapay_requests_total",
    "Logical API calls by HTTP method and outcome",
    ["method", "outcome"],
)
"""
Logical API calls (one per execute(), regardless of retries).

Labels:
- method: GET, POST, PATCH, DELETE
- outcome: success, failure (API or transport error), decode_error
  (2xx response whose body did not match the expected model)
"""

request_latency_seconds = Histogram(
    "rozetkapay_request_latency_seconds",
    "Latency of logical API calls including retries and backoff",
    ["method"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)
"""
Wall time of every logical call from the first attempt to the final
response. Calls ending in decode_error are recorded too.
"""

# === Retry Metrics ===

retries_total = Counter(
    "rozetkapay_retries_total",
    "Retries scheduled by failure kind",
    ["kind"],
)
"""
Retries scheduled after a transient failure.

Labels:
- kind: transport, server_error, rate_limited
"""

# === Fallback Metrics ===

fallbacks_total = Counter(
    "rozetkapay_fallbacks_total",
    "Calls re-routed to a legacy endpoint after a 404",
    ["method"],
)
