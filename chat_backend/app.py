# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask, Response

from chat_backend.infrastructure.container import Container
from chat_backend.infrastructure.db import init_db
from chat_backend.shared.logging import logger, setup_logging
from chat_backend.shared.middleware.error_handler import configure_error_handling
from chat_backend.shared.middleware.instrumentation import instrument
from chat_backend.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(container: Container | None = None, *, bootstrap_db: bool = True) -> Flask:
    container = container or Container()
    config = container.config
    setup_logging(debug_mode=config.debug_logging)

    if bootstrap_db:
        init_db()

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        supports_credentials=any(o != "*" for o in config.security.allowed_origins),
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.messages_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    if config.observability.metrics_enabled:
        instrument(app, container.metrics_sink, skip_paths=("/metrics",))

    app.extensions["container"] = container
    logger.info(f"Flask app initialized service={config.observability.service_name}")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080)
