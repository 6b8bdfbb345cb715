"""Observability: AI request usage accounting and summary logging."""

from typing import Any

import structlog

logger = structlog.get_logger().bind(source="observability")


class UsageTracker:
    """Counts AI requests made on behalf of the suggestion board.

    Construct one per session (or per test); nothing here is process-wide.
    """

    def __init__(self):
        self.requests = 0
        self.successes = 0
        self.failures = 0
        self.tokens_used = 0
        self._response_times: list[float] = []
        self._last_error: str | None = None

    def record_success(self, tokens_used: int | None = None, response_time: float | None = None):
        """Count a completed request with optional token/latency figures."""
        self.requests += 1
        self.successes += 1
        if tokens_used:
            self.tokens_used += tokens_used
        if response_time is not None:
            self._response_times.append(response_time)

    def record_failure(self, error: str | Exception | None = None):
        self.requests += 1
        self.failures += 1
        if error is not None:
            self._last_error = str(error)

    @property
    def success_rate(self) -> int:
        """Whole-number percentage of successful requests (0 when idle)."""
        if not self.requests:
            return 0
        return round(self.successes * 100 / self.requests)

    def summary(self) -> dict[str, Any]:
        """Return a summary of all recorded usage."""
        times = self._response_times
        return {
            "requests": self.requests,
            "successes": self.successes,
            "failures": self.failures,
            "success_rate": self.success_rate,
            "tokens_used": self.tokens_used,
            "avg_response_time": sum(times) / len(times) if times else None,
            "last_error": self._last_error,
        }

    def reset(self):
        """Clear all counters."""
        self.requests = 0
        self.successes = 0
        self.failures = 0
        self.tokens_used = 0
        self._response_times.clear()
        self._last_error = None


def log_usage_summary(tracker: UsageTracker):
    """Log the tracker's summary via structlog."""
    logger.info("usage_summary", **tracker.summary())
