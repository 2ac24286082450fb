"""Prometheus metrics for allowance calculations."""

from prometheus_client import Counter, Histogram

# Calculation metrics
allowance_calc_latency_ms = Histogram(
    "allowance_calc_latency_ms",
    "Allowance calculation latency in milliseconds",
    ["operation"],
    buckets=[1, 5, 10, 50, 100, 250, 500, 1000, 2500, 5000],
)

allowance_search_exhausted_total = Counter(
    "allowance_search_exhausted_total",
    "Total searches that reached their horizon without a match",
    ["search"],
)


class PrometheusAllowanceMetrics:
    """Prometheus-based allowance metrics implementation."""

    def record_latency(self, operation: str, latency_ms: float) -> None:
        """Record calculation latency."""
        allowance_calc_latency_ms.labels(operation=operation).observe(latency_ms)

    def inc_search_exhausted(self, search: str) -> None:
        """Increment exhausted-search counter."""
        allowance_search_exhausted_total.labels(search=search).inc()


metrics = PrometheusAllowanceMetrics()
