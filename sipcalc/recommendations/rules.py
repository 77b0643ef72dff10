"""Decision tables behind the investment plan recommendations.

Every rule is a plain lookup so it can be audited and tested on its own.
Unrecognized risk profiles are treated as ``conservative`` and unrecognized
goals fall back to ``DEFAULT_GOAL_RULE``; neither raises.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

logger = logging.getLogger(__name__)

DEFAULT_RISK_PROFILE = "conservative"

# Age brackets used by the contribution table.
UNDER_30 = "under_30"
FROM_30_TO_44 = "30_to_44"
FROM_45 = "45_plus"

# Percentage of monthly income suggested as the SIP amount.
CONTRIBUTION_TABLE: Dict[Tuple[str, str], int] = {
    (UNDER_30, "aggressive"): 30,
    (UNDER_30, "moderate"): 25,
    (UNDER_30, "conservative"): 20,
    (FROM_30_TO_44, "aggressive"): 25,
    (FROM_30_TO_44, "moderate"): 20,
    (FROM_30_TO_44, "conservative"): 15,
    (FROM_45, "aggressive"): 20,
    (FROM_45, "moderate"): 15,
    (FROM_45, "conservative"): 10,
}

# risk profile -> (base, floor); equity % = max(base - age, floor)
EQUITY_RULES: Dict[str, Tuple[int, int]] = {
    "aggressive": (100, 60),
    "moderate": (100, 40),
    "conservative": (70, 20),
}


@dataclass(frozen=True)
class GoalRule:
    description: str
    horizon: Callable[[int], int]


GOAL_RULES: Dict[str, GoalRule] = {
    "retirement": GoalRule("building a retirement corpus", lambda age: max(60 - age, 5)),
    "wealth": GoalRule("long-term wealth creation", lambda age: 15),
    "education": GoalRule("child's education planning", lambda age: 15 if age < 40 else 10),
    "house": GoalRule("saving for a home purchase", lambda age: 10),
    "short-term": GoalRule("achieving short-term financial goals", lambda age: 3),
}

DEFAULT_GOAL_RULE = GoalRule("general investment goals", lambda age: 10)

STRATEGY_IDEAS: Dict[str, tuple[str, ...]] = {
    "aggressive": (
        "Focus on equity mutual funds with diversified portfolios",
        "Consider a mix of large-cap, mid-cap, and small-cap exposure",
        "Stay invested for the long term to ride out market volatility",
        "Review and rebalance your portfolio annually",
    ),
    "moderate": (
        "Balance between equity and debt mutual funds",
        "Consider hybrid or balanced funds for diversification",
        "Maintain emergency fund in liquid instruments",
        "Gradually increase debt allocation as you near your goal",
    ),
    "conservative": (
        "Prioritize debt mutual funds and fixed-income instruments",
        "Consider equity exposure only for very long-term goals",
        "Focus on capital preservation and steady returns",
        "Keep sufficient liquidity for emergencies",
    ),
}

# Goals for which no tax planning block is emitted.
NO_TAX_PLANNING_GOALS = frozenset({"short-term"})

TAX_PLANNING_TEXT = (
    "Consider tax-saving investment options like ELSS (Equity Linked Savings Scheme) to optimize "
    "your tax liability under Section 80C, while also building wealth for your long-term goals."
)

REVIEW_TEXT = (
    "These are general ideas based on common investment principles. Your actual investment decisions "
    "should be made after consulting with a SEBI-registered investment advisor who can consider your "
    "complete financial situation, existing investments, and specific requirements."
)


def normalize_risk_profile(risk_profile: str | None) -> str:
    if risk_profile in EQUITY_RULES:
        return risk_profile
    logger.debug("Unrecognized risk profile %r, using %s", risk_profile, DEFAULT_RISK_PROFILE)
    return DEFAULT_RISK_PROFILE


def age_bracket(age: int) -> str:
    if age < 30:
        return UNDER_30
    if age < 45:
        return FROM_30_TO_44
    return FROM_45


def contribution_percentage(age: int, risk_profile: str) -> int:
    return CONTRIBUTION_TABLE[(age_bracket(age), normalize_risk_profile(risk_profile))]


def asset_allocation(age: int, risk_profile: str) -> tuple[int, int]:
    """Return (equity %, debt %); equity never drops below the profile's floor."""
    base, floor = EQUITY_RULES[normalize_risk_profile(risk_profile)]
    equity = max(base - age, floor)
    return equity, 100 - equity


def goal_rule(investment_goal: str | None) -> GoalRule:
    rule = GOAL_RULES.get(str(investment_goal or ""))
    if rule is None:
        logger.debug("No goal rule for %r, using general defaults", investment_goal)
        return DEFAULT_GOAL_RULE
    return rule


def investment_horizon(age: int, investment_goal: str | None) -> tuple[int, str]:
    """Return (horizon in years, goal description)."""
    rule = goal_rule(investment_goal)
    return rule.horizon(age), rule.description


def strategy_ideas(risk_profile: str) -> tuple[str, ...]:
    return STRATEGY_IDEAS[normalize_risk_profile(risk_profile)]


def includes_tax_planning(investment_goal: str | None) -> bool:
    return investment_goal not in NO_TAX_PLANNING_GOALS
