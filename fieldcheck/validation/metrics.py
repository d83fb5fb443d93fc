"""
Prometheus Metrics — validation observability.

Exposes:
- a counter of check failures by family, check and failure category
- a histogram of pipeline latency by family

Recording is skipped entirely when FIELDCHECK_METRICS_ENABLED is false.

Usage
-----
    from fieldcheck.validation.metrics import record_check_failure, timed_pipeline

    with timed_pipeline("email"):
        result = run_checks(value, ["pow"])

    record_check_failure("email", "pow", "consecutive_dots")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from fieldcheck.config import settings


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Total failed checks, labelled by family, check id and failure category.
CHECK_FAILURES: Counter = Counter(
    "fieldcheck_check_failures_total",
    "Total failed checks by validation family, check and failure category",
    ["family", "check", "reason"],
)

# Pipeline latency per validation family (seconds).
PIPELINE_LATENCY: Histogram = Histogram(
    "fieldcheck_pipeline_seconds",
    "Time spent running one check pipeline, in seconds",
    ["family"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_check_failure(family: str, check: str, reason: str) -> None:
    """Increment the failure counter for one failed check."""
    if settings.METRICS_ENABLED:
        CHECK_FAILURES.labels(family=family, check=check, reason=reason).inc()


@contextmanager
def timed_pipeline(family: str) -> Generator[None, None, None]:
    """
    Context manager that records pipeline latency for *family*.

    Usage::

        with timed_pipeline("email"):
            result = run_checks(value, checks)
    """
    if not settings.METRICS_ENABLED:
        yield
        return
    with PIPELINE_LATENCY.labels(family=family).time():
        yield
