"""Dash front end for the SIP calculator and plan ideas.

Run with ``python -m components.app``.
"""
from __future__ import annotations

import logging

import dash
import dash_bootstrap_components as dbc
from dash import Input, Output, State, html

from sipcalc.config import configure_logging, load_settings
from sipcalc.engine.projector import DegenerateRateError, project_input
from sipcalc.recommendations import recommend_plan
from sipcalc.validation import PLAN_FORM, SIP_FORM, validate_plan_form, validate_sip_form

from .forms import error_id, error_messages, plan_form, render_recommendations, render_sip_results, sip_form

logger = logging.getLogger(__name__)

DISCLAIMER = "All calculations and recommendations are for educational purposes only."


def build_layout():
    return dbc.Container(
        [
            html.H2("SIP Calculator & Investment Plan Maker", className="my-3"),
            dbc.Row([dbc.Col(sip_form(), md=6), dbc.Col(plan_form(), md=6)]),
            html.P(DISCLAIMER, className="text-muted mt-3"),
        ],
        fluid=True,
    )


def handle_sip_submit(*values):
    payload = {field.field: value for field, value in zip(SIP_FORM.fields, values)}
    sip, errors = validate_sip_form(payload)
    if sip is None:
        return [None, *error_messages(SIP_FORM, errors)]
    try:
        result = project_input(sip)
    except DegenerateRateError as exc:
        logger.warning("Projection rejected: %s", exc)
        return [html.Div(str(exc), className="error-message"), *error_messages(SIP_FORM, {})]
    return [render_sip_results(result), *error_messages(SIP_FORM, {})]


def handle_plan_submit(*values):
    payload = {field.field: value for field, value in zip(PLAN_FORM.fields, values)}
    plan, errors = validate_plan_form(payload)
    if plan is None:
        return [None, *error_messages(PLAN_FORM, errors)]
    return [render_recommendations(recommend_plan(plan)), *error_messages(PLAN_FORM, {})]


def create_dash_app() -> dash.Dash:
    app = dash.Dash(__name__, external_stylesheets=[dbc.themes.BOOTSTRAP])
    app.title = "SIP Calculator"
    app.layout = build_layout()

    @app.callback(
        [Output("sipResults", "children")] + [Output(error_id(f.field), "children") for f in SIP_FORM.fields],
        [Input("sipSubmit", "n_clicks")],
        [State(f.field, "value") for f in SIP_FORM.fields],
        prevent_initial_call=True,
    )
    def on_sip_submit(n_clicks, *values):
        return handle_sip_submit(*values)

    @app.callback(
        [Output("planResults", "children")] + [Output(error_id(f.field), "children") for f in PLAN_FORM.fields],
        [Input("planSubmit", "n_clicks")],
        [State(f.field, "value") for f in PLAN_FORM.fields],
        prevent_initial_call=True,
    )
    def on_plan_submit(n_clicks, *values):
        return handle_plan_submit(*values)

    return app


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("SIP Calculator initialized - %s", DISCLAIMER)
    create_dash_app().run(host=settings.host, port=settings.ui_port, debug=settings.debug)
