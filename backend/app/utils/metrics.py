"""Prometheus metrics for outbound calls and itinerary requests."""

from prometheus_client import Counter, Histogram

# Outbound call metrics
upstream_latency_ms = Histogram(
    "upstream_latency_ms",
    "Outbound service call latency in milliseconds",
    ["service", "outcome"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000, 16000, 32000],
)

upstream_errors_total = Counter(
    "upstream_errors_total",
    "Total outbound service call errors",
    ["service", "reason"],
)

hero_image_fallbacks_total = Counter(
    "hero_image_fallbacks_total",
    "Hero images served from the placeholder provider",
    ["reason"],
)

itinerary_requests_total = Counter(
    "itinerary_requests_total",
    "Itinerary requests by outcome",
    ["outcome"],
)


class PrometheusUpstreamMetrics:
    """Prometheus-based metrics for outbound calls."""

    def record_latency(self, service: str, outcome: str, latency_ms: float) -> None:
        """Record outbound call latency."""
        upstream_latency_ms.labels(service=service, outcome=outcome).observe(latency_ms)

    def inc_error(self, service: str, reason: str) -> None:
        """Increment error counter."""
        upstream_errors_total.labels(service=service, reason=reason).inc()

    def inc_image_fallback(self, reason: str) -> None:
        """Increment placeholder image counter."""
        hero_image_fallbacks_total.labels(reason=reason).inc()

    def inc_request(self, outcome: str) -> None:
        """Increment itinerary request counter."""
        itinerary_requests_total.labels(outcome=outcome).inc()


metrics = PrometheusUpstreamMetrics()
