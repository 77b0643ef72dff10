from __future__ import annotations

from typing import List

from ..data_model import PlanInput, RecommendationBlock
from ..engine.formatting import format_inr
from ..engine.projector import round_half_up
from . import rules


def suggested_investment(age: int, monthly_income: float, risk_profile: str) -> tuple[int, int]:
    """Return (suggested monthly amount, percentage of income)."""
    percentage = rules.contribution_percentage(age, risk_profile)
    return round_half_up(monthly_income * percentage / 100), percentage


def recommend(age: int, monthly_income: float, risk_profile: str, investment_goal: str) -> List[RecommendationBlock]:
    """Build the ordered recommendation blocks for a plan.

    The block order is fixed: suggested amount, allocation, horizon,
    strategy ideas, tax planning (skipped for short-term goals) and a closing
    review note.
    """
    amount, percentage = suggested_investment(age, monthly_income, risk_profile)
    equity, debt = rules.asset_allocation(age, risk_profile)
    horizon, goal_description = rules.investment_horizon(age, investment_goal)

    blocks: List[RecommendationBlock] = [
        RecommendationBlock(
            title="Suggested Monthly Investment",
            narrative=(
                f"Based on your monthly income of {format_inr(monthly_income)} and your {risk_profile} "
                f"risk profile, consider investing around {format_inr(amount)} per month ({percentage}% of "
                "income). This amount balances your current lifestyle needs with future financial goals."
            ),
        ),
        RecommendationBlock(
            title="Recommended Asset Allocation",
            narrative=f"For {goal_description}, consider an asset allocation approach:",
            bullets=(
                f"Equity-oriented investments: {equity}% (for growth potential)",
                f"Debt-oriented investments: {debt}% (for stability and capital preservation)",
                f"This allocation aligns with your age ({age} years) and {risk_profile} risk profile",
            ),
        ),
        RecommendationBlock(
            title="Investment Horizon",
            narrative=(
                f"For your goal of {goal_description}, consider a time horizon of approximately {horizon} "
                "years. Longer investment horizons generally allow for better wealth accumulation through "
                "the power of compounding."
            ),
        ),
        RecommendationBlock(title="Investment Strategy Ideas", bullets=rules.strategy_ideas(risk_profile)),
    ]

    if rules.includes_tax_planning(investment_goal):
        blocks.append(RecommendationBlock(title="Tax Planning", narrative=rules.TAX_PLANNING_TEXT))

    blocks.append(RecommendationBlock(title="Review and Adjust", narrative=rules.REVIEW_TEXT))
    return blocks


def recommend_plan(plan: PlanInput) -> List[RecommendationBlock]:
    return recommend(plan.age, plan.monthly_income, plan.risk_profile, plan.investment_goal)
