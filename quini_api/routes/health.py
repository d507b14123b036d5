from __future__ import annotations

import datetime as dt

from flask import Blueprint, jsonify

API_VERSION = "2.0"

bp = Blueprint("health", __name__)


@bp.get("/")
def index():
    return jsonify(
        {
            "message": "API de Quini 6 - Funcionando ✅",
            "endpoints": {
                "todosLosnumeros": "/v1/q6r/todoslosnumeros",
                "sorteos": "/v1/q6r/sorteos",
                "health": "/health",
            },
            "version": API_VERSION,
        }
    )


@bp.get("/health")
def health():
    timestamp = dt.datetime.now(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return jsonify({"status": "OK", "timestamp": timestamp})
