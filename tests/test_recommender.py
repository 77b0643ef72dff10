import pytest

from sipcalc.data_model import INVESTMENT_GOALS, PlanInput
from sipcalc.recommendations import recommend, recommend_plan, suggested_investment

FULL_TITLES = [
    "Suggested Monthly Investment",
    "Recommended Asset Allocation",
    "Investment Horizon",
    "Investment Strategy Ideas",
    "Tax Planning",
    "Review and Adjust",
]


def test_young_aggressive_retirement_plan():
    blocks = recommend(25, 50000, "aggressive", "retirement")

    assert [block.title for block in blocks] == FULL_TITLES

    suggested = blocks[0].narrative
    assert "₹50,000" in suggested
    assert "₹15,000 per month (30% of income)" in suggested
    assert "aggressive risk profile" in suggested

    allocation = blocks[1]
    assert allocation.narrative == "For building a retirement corpus, consider an asset allocation approach:"
    assert allocation.bullets == (
        "Equity-oriented investments: 75% (for growth potential)",
        "Debt-oriented investments: 25% (for stability and capital preservation)",
        "This allocation aligns with your age (25 years) and aggressive risk profile",
    )

    assert "approximately 35 years" in blocks[2].narrative
    assert blocks[3].narrative is None
    assert len(blocks[3].bullets) == 4


def test_short_term_goal_has_no_tax_planning():
    blocks = recommend(40, 80000, "moderate", "short-term")

    titles = [block.title for block in blocks]
    assert titles == [title for title in FULL_TITLES if title != "Tax Planning"]
    assert titles[-1] == "Review and Adjust"


@pytest.mark.parametrize("goal", list(INVESTMENT_GOALS) + ["something-else"])
def test_block_count_depends_only_on_short_term(goal):
    blocks = recommend(35, 60000, "moderate", goal)
    tax_blocks = [block for block in blocks if block.title == "Tax Planning"]

    if goal == "short-term":
        assert len(blocks) == 5
        assert tax_blocks == []
    else:
        assert len(blocks) == 6
        assert len(tax_blocks) == 1


def test_unknown_risk_profile_uses_conservative_rules():
    blocks = recommend(30, 100000, "yolo", "wealth")
    baseline = recommend(30, 100000, "conservative", "wealth")

    assert "yolo risk profile" in blocks[0].narrative
    assert "(15% of income)" in blocks[0].narrative
    assert blocks[1].bullets[0] == baseline[1].bullets[0]
    assert blocks[3].bullets == baseline[3].bullets


def test_suggested_amount_rounds_half_up():
    assert suggested_investment(30, 10002.5, "moderate") == (2001, 20)
    assert suggested_investment(30, 10001, "moderate") == (2000, 20)


def test_equity_floor_for_older_aggressive_investor():
    blocks = recommend(80, 50000, "aggressive", "house")

    assert blocks[1].bullets[0] == "Equity-oriented investments: 60% (for growth potential)"
    assert blocks[1].bullets[1] == "Debt-oriented investments: 40% (for stability and capital preservation)"


def test_recommendations_are_deterministic():
    assert recommend(52, 250000, "moderate", "education") == recommend(52, 250000, "moderate", "education")


def test_recommend_plan_matches_recommend():
    plan = PlanInput(age=33, monthly_income=75000, risk_profile="conservative", investment_goal="house")

    assert recommend_plan(plan) == recommend(33, 75000, "conservative", "house")


def test_block_payloads_omit_missing_parts():
    blocks = recommend(28, 40000, "moderate", "wealth")

    strategy = blocks[3].to_dict()
    review = blocks[-1].to_dict()

    assert set(strategy) == {"title", "list"}
    assert set(review) == {"title", "content"}
    assert review["content"].startswith("These are general ideas")
