from .base import FieldDefinition, FormModel
from .plan import (
    GOAL_LABELS,
    INVESTMENT_GOALS,
    RISK_PROFILES,
    PlanFormModel,
    PlanInput,
    RecommendationBlock,
)
from .sip import SIPFormModel, SIPInput, SIPResult

__all__ = [
    "FieldDefinition",
    "FormModel",
    "GOAL_LABELS",
    "INVESTMENT_GOALS",
    "RISK_PROFILES",
    "PlanFormModel",
    "PlanInput",
    "RecommendationBlock",
    "SIPFormModel",
    "SIPInput",
    "SIPResult",
]
