# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Protocol

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, CollectorRegistry, Counter, Histogram, generate_latest

_DEFAULT_SINK: PrometheusMetricsSink | None = None


class MetricsSink(Protocol):
    def increment(self, method: str, status: str) -> None: ...
    def observe_duration(self, method: str, status: str, seconds: float) -> None: ...


class PrometheusMetricsSink(MetricsSink):
    """Request counter and latency histogram, both labelled by method and status."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        self.requests = Counter(
            "http_requests_total",
            "Total number of HTTP requests.",
            labelnames=("method", "status"),
            registry=self.registry,
        )
        self.duration = Histogram(
            "http_duration_seconds",
            "Histogram of HTTP request durations in seconds.",
            labelnames=("method", "status"),
            registry=self.registry,
        )

    def increment(self, method: str, status: str) -> None:
        self.requests.labels(method=method, status=status).inc()

    def observe_duration(self, method: str, status: str, seconds: float) -> None:
        self.duration.labels(method=method, status=status).observe(seconds)

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST


def default_metrics_sink() -> PrometheusMetricsSink:
    """Process-wide sink registered on the global prometheus registry."""

    global _DEFAULT_SINK
    if _DEFAULT_SINK is None:
        _DEFAULT_SINK = PrometheusMetricsSink(REGISTRY)
    return _DEFAULT_SINK


@contextmanager
def track_latency(
    sink: MetricsSink,
    method: str,
    status_getter: Callable[[], str],
    *,
    timer: Callable[[], float] = time.perf_counter,
) -> Iterator[None]:
    start = timer()
    try:
        yield
    finally:
        duration = timer() - start
        status = status_getter()
        sink.increment(method, status)
        sink.observe_duration(method, status, duration)


__all__ = [
    "MetricsSink",
    "PrometheusMetricsSink",
    "default_metrics_sink",
    "track_latency",
]
