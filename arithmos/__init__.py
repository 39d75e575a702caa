from __future__ import annotations

import time
from flask import Flask, Response, g, request

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from arithmos.logging import configure_logging

from arithmos.blueprints.api import api_bp


REQUEST_COUNT = Counter(
    "flask_app_requests_total", "Total HTTP requests", ["method", "path", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "flask_app_request_latency_seconds", "Request latency", ["endpoint"]
)


def create_app() -> Flask:
    app = Flask(__name__)
    app.config.from_object("config.Config")

    configure_logging(app.config.get("LOG_LEVEL", "INFO"), json_format=app.config.get("LOG_JSON", True))

    app.register_blueprint(api_bp, url_prefix="/api")

    @app.before_request
    def _start_timer() -> None:  # pragma: no cover - request timing
        g.start_time = time.perf_counter()

    @app.after_request
    def _record_request(
        response: Response,
    ) -> Response:  # pragma: no cover - request timing
        elapsed = time.perf_counter() - getattr(g, "start_time", time.perf_counter())
        endpoint = request.endpoint or "unknown"
        REQUEST_LATENCY.labels(endpoint).observe(elapsed)
        REQUEST_COUNT.labels(request.method, request.path, response.status_code).inc()
        return response

    @app.route("/metrics")
    def metrics() -> Response:
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    @app.route("/health")
    def health() -> tuple[str, int]:
        return "ok", 200

    @app.route("/ready")
    def ready() -> tuple[str, int]:
        return "ok", 200

    return app
