from __future__ import annotations

import asyncio

from flask import Blueprint, current_app, jsonify

from quini_scraper.fallback import EXAMPLE_NOTE, FallbackOrchestrator, example_results

from ..schemas import DrawListResponse, DrawSummaryResponse, ResultSetResponse

bp = Blueprint("results", __name__)

EXTENSION_KEY = "quini6"


def get_orchestrator() -> FallbackOrchestrator:
    sources = current_app.extensions[EXTENSION_KEY]["sources"]
    return FallbackOrchestrator(sources, logger=current_app.logger)


@bp.get("/todoslosnumeros")
def all_numbers():
    current_app.logger.info("Fetching Quini 6 results")
    try:
        result = asyncio.run(get_orchestrator().collect())
    except Exception as exc:
        # Scraping failures never surface as errors; callers always get a payload.
        current_app.logger.exception("Result collection failed: %s", exc)
        result = example_results().with_note(EXAMPLE_NOTE)
    return jsonify(ResultSetResponse.from_result(result).to_payload())


@bp.get("/sorteos")
def draws():
    summary = asyncio.run(get_orchestrator().latest_draw())
    response = DrawListResponse(sorteos=[DrawSummaryResponse.from_summary(summary)])
    return jsonify(response.model_dump())
