"""Query metrics collection for the fuzzy index."""

from collections import defaultdict, deque
from dataclasses import dataclass
import time


@dataclass
class QueryMetrics:
    """Metrics for a single lookup."""

    latency_ms: float
    result_count: int
    candidate_count: int = 0
    gram_size: int | None = None
    exact: bool = False
    fallback: bool = False


class MetricsCollector:
    """Lightweight metrics collector for lookups."""

    def __init__(self, window_size: int = 1000):
        self.window_size = window_size
        self._metrics = deque(maxlen=window_size)
        self._counters = defaultdict(int)

    def start_timer(self) -> float:
        return time.perf_counter()

    def elapsed_ms(self, started: float) -> float:
        return (time.perf_counter() - started) * 1000

    def record_query(self, metrics: QueryMetrics):
        """Record lookup metrics."""
        self._metrics.append(metrics)
        self._counters["total_queries"] += 1

        if metrics.exact:
            self._counters["exact_hits"] += 1
        if metrics.result_count == 0:
            self._counters["misses"] += 1
        if metrics.fallback:
            self._counters["fallbacks"] += 1

    def get_stats(self) -> dict:
        """Get statistics over the current window."""
        if not self._metrics:
            return {}

        latencies = sorted(m.latency_ms for m in self._metrics)
        total = self._counters["total_queries"]

        return {
            "count": len(self._metrics),
            "latency": {
                "mean": sum(latencies) / len(latencies),
                "p95": latencies[int(len(latencies) * 0.95)],
                "max": latencies[-1],
            },
            "queries": {
                "total": total,
                "exact_rate": self._counters["exact_hits"] / total,
                "miss_rate": self._counters["misses"] / total,
                "fallback_rate": self._counters["fallbacks"] / total,
            },
        }

    def reset(self):
        """Reset all metrics."""
        self._metrics.clear()
        self._counters.clear()


# Global metrics collector instance
_metrics_collector = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    """Get the global metrics collector."""
    return _metrics_collector
