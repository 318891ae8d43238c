# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""WSGI middleware recording status and latency of every request."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from chat_backend.infrastructure.observability import MetricsSink, track_latency

if TYPE_CHECKING:
    from flask import Flask

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]

DEFAULT_STATUS = "200"
ERROR_STATUS = "500"


class _StatusLatch:
    """Wraps ``start_response`` and remembers the first status written."""

    __slots__ = ("_start_response", "status")

    def __init__(self, start_response: Callable[..., Any]) -> None:
        self._start_response = start_response
        self.status: str | None = None

    def __call__(self, status: str, headers: list[tuple[str, str]], exc_info: Any = None):
        if self.status is None:
            self.status = status.split(" ", 1)[0]
        if exc_info is not None:
            return self._start_response(status, headers, exc_info)
        return self._start_response(status, headers)

    def resolved(self) -> str:
        return self.status or DEFAULT_STATUS


class InstrumentationMiddleware:
    """Counts requests and observes their duration keyed by method and status.

    Each request gets its own :class:`_StatusLatch`, so wrapped apps share
    nothing per request. The outcome is recorded exactly once, when the
    inner app returns or raises:

    * the first status passed to ``start_response`` is used;
    * an app that never calls ``start_response`` is recorded as ``200``;
    * an app that raises before writing a status is recorded as ``500``;
      the exception always propagates.

    Recording happens when the app returns its iterable, before the body is
    consumed. Streamed bodies are not part of the duration, and an app that
    only calls ``start_response`` from inside its iterable is recorded as
    ``200``. Flask's ``wsgi_app`` calls ``start_response`` before returning.

    Response bytes and headers pass through untouched.
    """

    def __init__(
        self,
        app: WSGIApp,
        sink: MetricsSink,
        *,
        timer: Callable[[], float] = time.perf_counter,
        skip_paths: Iterable[str] = (),
    ) -> None:
        self.app = app
        self.sink = sink
        self.timer = timer
        self.skip_paths = frozenset(skip_paths)

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]):
        if environ.get("PATH_INFO", "") in self.skip_paths:
            return self.app(environ, start_response)

        method = environ.get("REQUEST_METHOD", "GET")
        latch = _StatusLatch(start_response)
        failed = False

        def _status() -> str:
            return ERROR_STATUS if failed else latch.resolved()

        with track_latency(self.sink, method, _status, timer=self.timer):
            try:
                return self.app(environ, latch)
            except BaseException:
                failed = latch.status is None
                raise


def instrument(app: Flask, sink: MetricsSink, **kwargs: Any) -> Flask:
    """Install :class:`InstrumentationMiddleware` around ``app.wsgi_app``."""

    app.wsgi_app = InstrumentationMiddleware(app.wsgi_app, sink, **kwargs)  # type: ignore[method-assign]
    return app


__all__ = ["InstrumentationMiddleware", "instrument"]
