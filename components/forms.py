# components/forms.py
from __future__ import annotations

from typing import Dict, Iterable

import dash_bootstrap_components as dbc
from dash import dcc, html

from sipcalc.data_model import GOAL_LABELS, FieldDefinition, FormModel, RecommendationBlock, SIPResult
from sipcalc.engine.formatting import format_inr
from sipcalc.validation import PLAN_FORM, SIP_FORM

RESULT_LABELS = {
    "totalInvestment": "Total Investment",
    "estimatedReturns": "Estimated Returns",
    "totalValue": "Total Value",
}


def error_id(field_id: str) -> str:
    return f"{field_id}Error"


def _option_label(field: FieldDefinition, option: str) -> str:
    if field.field == "investmentGoal":
        return GOAL_LABELS.get(option, option)
    return option.capitalize()


def _field_control(field: FieldDefinition):
    if field.kind == "select":
        options = [{"label": _option_label(field, opt), "value": opt} for opt in field.options or []]
        return dcc.Dropdown(id=field.field, options=options, value=field.default or None, clearable=False)
    return dbc.Input(
        id=field.field,
        type="number",
        value=field.default,
        min=field.min_value,
        max=field.max_value,
        step=field.step,
    )


def _field_group(field: FieldDefinition):
    children = [dbc.Label(field.label, html_for=field.field), _field_control(field)]
    if field.help:
        children.append(dbc.FormText(field.help))
    children.append(html.Div(id=error_id(field.field), className="error-message"))
    return html.Div(children, className="mb-3")


def build_form(model: FormModel, submit_label: str):
    groups = [_field_group(field) for field in model.fields]
    groups.append(dbc.Button(submit_label, id=f"{model.name}Submit", color="primary", n_clicks=0))
    return html.Div(groups, id=f"{model.name}Form")


def sip_form():
    return dbc.Card(
        [
            dbc.CardHeader("SIP Calculator"),
            dbc.CardBody([build_form(SIP_FORM, "Calculate"), html.Div(id="sipResults", className="mt-3")]),
        ]
    )


def plan_form():
    return dbc.Card(
        [
            dbc.CardHeader("Investment Plan Ideas"),
            dbc.CardBody([build_form(PLAN_FORM, "Generate Plan"), html.Div(id="planResults", className="mt-3")]),
        ]
    )


def render_sip_results(result: SIPResult):
    rows = [
        html.Div(
            [html.Span(RESULT_LABELS[key], className="result-label"), html.Strong(format_inr(value), id=key)],
            className="result-item",
        )
        for key, value in result.to_dict().items()
    ]
    return html.Div(rows, className="results")


def render_recommendation(block: RecommendationBlock):
    children = [html.H4(block.title)]
    if block.narrative:
        children.append(html.P(block.narrative))
    if block.bullets:
        children.append(html.Ul([html.Li(item) for item in block.bullets]))
    return html.Div(children, className="plan-recommendation")


def render_recommendations(blocks: Iterable[RecommendationBlock]):
    return html.Div([render_recommendation(block) for block in blocks], id="planContent")


def error_messages(model: FormModel, errors: Dict[str, str]) -> list[str]:
    """Per-field messages in form order; empty string clears a field."""
    return [errors.get(field.field, "") for field in model.fields]
