"""In-process aggregation of HTTP response times."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Optional

TOTAL = "http"


def status_class(status_code: int) -> str:
    """Bucket a status code as ``2xx``, ``4xx`` and so on."""

    return f"{status_code // 100}xx"


@dataclass
class ResponseTimeStats:
    count: int = 0
    total_ms: float = 0.0
    min_ms: Optional[float] = None
    max_ms: float = 0.0

    def add(self, elapsed_ms: float) -> None:
        self.count += 1
        self.total_ms += elapsed_ms
        self.max_ms = max(self.max_ms, elapsed_ms)
        self.min_ms = elapsed_ms if self.min_ms is None else min(self.min_ms, elapsed_ms)

    def summary(self) -> Dict[str, float]:
        return {
            "count": self.count,
            "avg_ms": self.total_ms / self.count if self.count else 0.0,
            "min_ms": self.min_ms or 0.0,
            "max_ms": self.max_ms,
        }


class LatencyMonitor:
    """Response times per status class, plus an ``http`` bucket for all of them."""

    def __init__(self) -> None:
        self._buckets: Dict[str, ResponseTimeStats] = {}
        self._lock = threading.Lock()

    def observe(self, status_code: int, elapsed_ms: float) -> None:
        with self._lock:
            for key in (TOTAL, status_class(status_code)):
                self._buckets.setdefault(key, ResponseTimeStats()).add(elapsed_ms)

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        with self._lock:
            return {key: stats.summary() for key, stats in self._buckets.items()}

    def reset(self) -> None:
        with self._lock:
            self._buckets.clear()


monitor = LatencyMonitor()


def latency_summary() -> Dict[str, Dict[str, float]]:
    return monitor.snapshot()


__all__ = ["LatencyMonitor", "ResponseTimeStats", "latency_summary", "monitor", "status_class"]
