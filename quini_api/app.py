from __future__ import annotations

from typing import Optional, Sequence

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from quini_scraper.datasource import ResultSource
from quini_scraper.service import build_sources

from .config import AppSettings, load_settings
from .routes.health import bp as health_bp
from .routes.results import EXTENSION_KEY
from .routes.results import bp as results_bp

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, PATCH, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def create_app(
    settings: Optional[AppSettings] = None,
    sources: Optional[Sequence[ResultSource]] = None,
) -> Flask:
    settings = settings or load_settings()
    if sources is None:
        sources = build_sources(settings.scraper)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.server.debug
    app.extensions[EXTENSION_KEY] = {"sources": tuple(sources)}

    app.register_blueprint(health_bp)
    app.register_blueprint(results_bp, url_prefix="/v1/q6r")

    @app.after_request
    def add_cors_headers(response):
        for key, value in CORS_HEADERS.items():
            response.headers.setdefault(key, value)
        return response

    @app.errorhandler(Exception)
    def handle_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return jsonify({"error": exc.name, "message": exc.description}), exc.code
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify({"error": "internal_error", "message": str(exc)}), 500

    return app
