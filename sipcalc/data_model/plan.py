from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import FieldDefinition, FormModel

RISK_PROFILES: tuple[str, ...] = ("conservative", "moderate", "aggressive")
INVESTMENT_GOALS: tuple[str, ...] = ("retirement", "wealth", "education", "house", "short-term", "other")

GOAL_LABELS = {
    "retirement": "Retirement",
    "wealth": "Wealth Creation",
    "education": "Child's Education",
    "house": "Buying a House",
    "short-term": "Short-term Goals",
    "other": "Other",
}


@dataclass(frozen=True)
class PlanInput:
    age: int
    monthly_income: float
    risk_profile: str
    investment_goal: str


@dataclass(frozen=True)
class RecommendationBlock:
    title: str
    narrative: Optional[str] = None
    bullets: Optional[tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"title": self.title}
        if self.narrative:
            payload["content"] = self.narrative
        if self.bullets:
            payload["list"] = list(self.bullets)
        return payload


class PlanFormModel(FormModel):
    def __init__(self) -> None:
        fields: List[FieldDefinition] = [
            FieldDefinition("age", "Your Age", default=30, min_value=18, max_value=100, step=1, message="Age"),
            FieldDefinition(
                "monthlyIncome",
                "Monthly Income (₹)",
                default=50000,
                min_value=10_000,
                max_value=100_000_000,
                step=1000,
                message="Monthly income",
            ),
            FieldDefinition(
                "riskProfile",
                "Risk Profile",
                kind="select",
                default="",
                options=list(RISK_PROFILES),
                message="Please select a risk profile",
            ),
            FieldDefinition(
                "investmentGoal",
                "Investment Goal",
                kind="select",
                default="",
                options=list(INVESTMENT_GOALS),
                help="Other goals use a general 10 year horizon",
                message="Please select an investment goal",
            ),
        ]
        super().__init__("plan", fields)
