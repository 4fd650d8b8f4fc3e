"""Self-monitoring metrics for row ordering and series identity."""
from typing import Optional

from prometheus_client import CollectorRegistry, Counter

from seriesrows.config import Config


class SelfMetrics:
    """Counters for sorts and same-series checks."""

    def __init__(self, registry=None, prefix=""):
        if registry is None:
            registry = CollectorRegistry()
        self.registry = registry

        self.sorts_total = Counter(
            f"{prefix}row_sorts_total",
            "Total number of row collection sorts",
            ["algorithm"],
            registry=registry
        )

        self.rows_sorted_total = Counter(
            f"{prefix}rows_sorted_total",
            "Total number of rows passed through a sort",
            registry=registry
        )

        self.same_series_checks_total = Counter(
            f"{prefix}same_series_checks_total",
            "Total number of series identity checks",
            ["result"],
            registry=registry
        )

    def record_sort(self, algorithm: str, count: int):
        """Record one sort of count rows."""
        self.sorts_total.labels(algorithm=algorithm).inc()
        self.rows_sorted_total.inc(count)

    def record_same_series(self, result: bool):
        """Record a same-series check."""
        self.same_series_checks_total.labels(result=str(result).lower()).inc()


def build_self_metrics(config: Config, registry=None) -> Optional[SelfMetrics]:
    """Create self-metrics from config, or None when disabled."""
    if not config.self_metrics.enabled:
        return None
    return SelfMetrics(registry=registry, prefix=config.self_metrics.prefix)
