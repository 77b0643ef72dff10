"""REST backend for the SIP calculator and plan recommendations."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from flask import Flask, jsonify, request

from sipcalc.config import TRUTHY, Settings, configure_logging, load_settings
from sipcalc.data_model import GOAL_LABELS
from sipcalc.engine.formatting import format_inr
from sipcalc.engine.projector import DegenerateRateError, project_input
from sipcalc.engine.schedule import aggregate_schedule, projection_schedule
from sipcalc.recommendations import recommend_plan
from sipcalc.validation import PLAN_FORM, SIP_FORM, ValidationError, require_plan_input, require_sip_input

logger = logging.getLogger(__name__)

SCHEDULE_FREQS = {"Y", "5Y"}


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in TRUTHY


def _sip_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    sip = require_sip_input(payload)
    result = project_input(sip)
    body: Dict[str, Any] = {
        "result": result.to_dict(),
        "formatted": {key: format_inr(value) for key, value in result.to_dict().items()},
    }
    if _flag(payload.get("schedule")):
        freq = str(payload.get("freq") or "Y").upper()
        if freq not in SCHEDULE_FREQS:
            freq = "Y"
        df = aggregate_schedule(
            projection_schedule(sip.monthly_amount, sip.annual_return_percent, sip.years),
            freq=freq,
        )
        body["freq"] = freq
        body["schedule"] = df.to_dict(orient="records")
    return body


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or load_settings()
    app = Flask(__name__)
    app.config["SIPCALC_SETTINGS"] = settings

    @app.after_request
    def apply_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = settings.cors_origin
        response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return jsonify({"error": "Invalid input.", "errors": exc.errors}), 400

    @app.errorhandler(DegenerateRateError)
    def handle_degenerate_rate(exc: DegenerateRateError):
        logger.warning("Projection rejected: %s", exc)
        return jsonify({"error": str(exc)}), 422

    @app.get("/api/health")
    def healthcheck():
        return jsonify({"status": "ok"})

    @app.get("/api/schema")
    def get_schema():
        return jsonify(
            {
                "sip": SIP_FORM.to_dict(),
                "plan": PLAN_FORM.to_dict(),
                "goalLabels": GOAL_LABELS,
                "freqOptions": [
                    {"label": "Yearly", "value": "Y"},
                    {"label": "Every 5 years", "value": "5Y"},
                ],
            }
        )

    @app.post("/api/sip")
    def calculate_sip():
        payload = request.get_json(silent=True) or {}
        return jsonify(_sip_payload(payload))

    @app.post("/api/plan")
    def generate_plan():
        payload = request.get_json(silent=True) or {}
        plan = require_plan_input(payload)
        blocks = recommend_plan(plan)
        logger.debug("Generated %d recommendation blocks for goal=%s", len(blocks), plan.investment_goal)
        return jsonify({"recommendations": [block.to_dict() for block in blocks]})

    return app


app = create_app()


if __name__ == "__main__":
    config = app.config["SIPCALC_SETTINGS"]
    configure_logging(config.log_level)
    app.run(host=config.host, port=config.port, debug=config.debug)
