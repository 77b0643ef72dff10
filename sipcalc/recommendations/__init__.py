from .recommender import recommend, recommend_plan, suggested_investment

__all__ = ["recommend", "recommend_plan", "suggested_investment"]
