from __future__ import annotations

from dataclasses import dataclass

from .base import FieldDefinition, FormModel


@dataclass(frozen=True)
class SIPInput:
    monthly_amount: float
    annual_return_percent: float
    years: float

    def monthly_rate(self) -> float:
        return self.annual_return_percent / 12 / 100

    def months(self) -> float:
        return self.years * 12


@dataclass(frozen=True)
class SIPResult:
    total_investment: int
    estimated_returns: int
    total_value: int

    def to_dict(self) -> dict[str, int]:
        return {
            "totalInvestment": self.total_investment,
            "estimatedReturns": self.estimated_returns,
            "totalValue": self.total_value,
        }


class SIPFormModel(FormModel):
    def __init__(self) -> None:
        fields = [
            FieldDefinition(
                "monthlyAmount",
                "Monthly Investment (₹)",
                default=5000,
                min_value=500,
                max_value=10_000_000,
                step=500,
                message="Monthly amount",
            ),
            FieldDefinition(
                "annualReturn",
                "Expected Annual Return (%)",
                default=12,
                min_value=1,
                max_value=30,
                step=0.5,
                message="Annual return",
            ),
            FieldDefinition(
                "years",
                "Investment Period (Years)",
                default=10,
                min_value=1,
                max_value=40,
                step=1,
                message="Investment period",
            ),
        ]
        super().__init__("sip", fields)
