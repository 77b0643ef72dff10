"""Input checks for the SIP and plan forms.

The calculation core trusts its inputs, so every payload coming from the UI
or the REST API passes through here first.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Tuple

from .data_model import FormModel, PlanFormModel, PlanInput, SIPFormModel, SIPInput

SIP_FORM = SIPFormModel()
PLAN_FORM = PlanFormModel()
PAYLOAD_MESSAGE = "Expected a JSON object"


class ValidationError(ValueError):
    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(f"{key}: {msg}" for key, msg in errors.items()))
        self.errors = errors


def parse_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number):
        return None
    return number


def _format_bound(bound: float) -> str:
    if float(bound).is_integer():
        return str(int(bound))
    return str(bound)


def validate_number(value: Any, min_value: float, max_value: float, field_name: str) -> str | None:
    number = parse_number(value)
    if number is None:
        return f"{field_name} is required"
    if number < min_value:
        return f"{field_name} must be at least {_format_bound(min_value)}"
    if number > max_value:
        return f"{field_name} must not exceed {_format_bound(max_value)}"
    return None


def validate_choice(value: Any, message: str) -> str | None:
    if value is None or not str(value).strip():
        return message
    return None


def _collect_errors(model: FormModel, payload: Dict[str, Any]) -> Dict[str, str]:
    if not isinstance(payload, dict):
        return {"payload": PAYLOAD_MESSAGE}
    errors: Dict[str, str] = {}
    for definition in model.fields:
        value = payload.get(definition.field)
        if definition.kind == "select":
            error = validate_choice(value, definition.message or f"Please select {definition.label}")
        else:
            error = validate_number(
                value,
                definition.min_value if definition.min_value is not None else -math.inf,
                definition.max_value if definition.max_value is not None else math.inf,
                definition.message or definition.label,
            )
        if error:
            errors[definition.field] = error
    return errors


def validate_sip_form(payload: Dict[str, Any]) -> Tuple[SIPInput | None, Dict[str, str]]:
    errors = _collect_errors(SIP_FORM, payload)
    if errors:
        return None, errors
    sip = SIPInput(
        monthly_amount=parse_number(payload["monthlyAmount"]),
        annual_return_percent=parse_number(payload["annualReturn"]),
        years=parse_number(payload["years"]),
    )
    return sip, {}


def validate_plan_form(payload: Dict[str, Any]) -> Tuple[PlanInput | None, Dict[str, str]]:
    errors = _collect_errors(PLAN_FORM, payload)
    if errors:
        return None, errors
    plan = PlanInput(
        age=int(parse_number(payload["age"])),
        monthly_income=parse_number(payload["monthlyIncome"]),
        risk_profile=str(payload["riskProfile"]).strip(),
        investment_goal=str(payload["investmentGoal"]).strip(),
    )
    return plan, {}


def require_sip_input(payload: Dict[str, Any]) -> SIPInput:
    sip, errors = validate_sip_form(payload)
    if sip is None:
        raise ValidationError(errors)
    return sip


def require_plan_input(payload: Dict[str, Any]) -> PlanInput:
    plan, errors = validate_plan_form(payload)
    if plan is None:
        raise ValidationError(errors)
    return plan
