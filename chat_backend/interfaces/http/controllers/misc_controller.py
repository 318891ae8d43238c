# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from http import HTTPStatus

from flask import Blueprint, Response, abort, jsonify
from sqlalchemy.exc import SQLAlchemyError

from chat_backend.infrastructure.health import check_database
from chat_backend.infrastructure.observability import PrometheusMetricsSink


class MiscController:
    def __init__(
        self,
        *,
        metrics: PrometheusMetricsSink | None = None,
        health_check: Callable[[], bool] = check_database,
    ) -> None:
        self._metrics = metrics
        self._health_check = health_check

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        if self._metrics is not None:
            bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._health_check()
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            status["ok"] = False
            status["database"] = f"error: {type(exc).__name__}"
        return jsonify(status)

    def metrics(self) -> Response:
        metrics = self._metrics
        if metrics is None:
            abort(HTTPStatus.NOT_FOUND)
        body, content_type = metrics.render()
        return Response(body, content_type=content_type)
