"""Query statistics shared by every call in the process."""

import threading
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class QueryStatistics:
    """Counts completed queries and the time spent on them."""

    total_queries: int = 0
    successful_queries: int = 0
    failed_queries: int = 0
    total_time_ms: float = 0.0

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def average_response_time_ms(self) -> float:
        with self._lock:
            if not self.total_queries:
                return 0.0
            return self.total_time_ms / self.total_queries

    @property
    def success_rate(self) -> float:
        """Percentage of queries that completed with status 0."""
        with self._lock:
            if not self.total_queries:
                return 0.0
            return self.successful_queries / self.total_queries * 100

    def record_query(self, elapsed_ms: float, success: bool) -> None:
        with self._lock:
            self.total_queries += 1
            if success:
                self.successful_queries += 1
            else:
                self.failed_queries += 1
            self.total_time_ms += elapsed_ms

    def reset(self) -> None:
        with self._lock:
            self.total_queries = 0
            self.successful_queries = 0
            self.failed_queries = 0
            self.total_time_ms = 0.0

    def snapshot(self) -> dict:
        """Return the counters and derived values as a plain dict."""
        average = self.average_response_time_ms
        rate = self.success_rate

        with self._lock:
            return {
                "total_queries": self.total_queries,
                "successful_queries": self.successful_queries,
                "failed_queries": self.failed_queries,
                "average_response_time_ms": round(average, 2),
                "success_rate": round(rate, 2),
            }


# Default statistics instance
_statistics: Optional[QueryStatistics] = None


def get_statistics() -> QueryStatistics:
    """Get or create the default statistics instance."""
    global _statistics  # pylint: disable=global-statement

    if _statistics is None:
        _statistics = QueryStatistics()

    return _statistics


def reset_statistics() -> None:
    """Drop the default statistics instance (useful for testing)."""
    global _statistics  # pylint: disable=global-statement

    _statistics = None
