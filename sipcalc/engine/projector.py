"""Future value projection for a monthly SIP (systematic investment plan).

Contributions are assumed to land at the start of every month (annuity-due):

    FV = P * (((1 + r) ** n - 1) / r) * (1 + r)

with ``r`` the monthly rate and ``n`` the number of months, which may be
fractional. Each figure of the result is rounded independently from its
unrounded value, so ``total_value`` can differ by one unit from
``total_investment + estimated_returns``.
"""
from __future__ import annotations

import logging
import math

from ..data_model import SIPInput, SIPResult

logger = logging.getLogger(__name__)


class ProjectionError(ValueError):
    """Raised when a projection cannot produce a finite result."""


class DegenerateRateError(ProjectionError):
    """The monthly rate makes the compounding factor undefined or non-finite."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (-2.5 -> -2, 2.5 -> 3)."""
    whole = math.floor(value)
    return int(whole + (value - whole >= 0.5))


def _compound(rate: float, months: float) -> float:
    base = 1 + rate
    if base < 0 and not float(months).is_integer():
        raise DegenerateRateError(f"Monthly rate {rate} cannot compound over {months} months.")
    try:
        return base ** months
    except OverflowError as exc:
        raise DegenerateRateError(f"Compounding overflowed for rate {rate} over {months} months.") from exc


def future_value(sip: SIPInput) -> float:
    rate = sip.monthly_rate()
    months = sip.months()
    if rate == 0:
        return sip.monthly_amount * months

    compounded = _compound(rate, months)
    if compounded == 1.0:
        # rate too small to register in floating point
        logger.debug("Rate %s does not compound over %s months; using contributions only", rate, months)
        return sip.monthly_amount * months
    return sip.monthly_amount * ((compounded - 1) / rate) * (1 + rate)


def project_input(sip: SIPInput) -> SIPResult:
    total_investment = sip.monthly_amount * sip.months()
    value = future_value(sip)
    if not (math.isfinite(value) and math.isfinite(total_investment)):
        raise DegenerateRateError(
            f"Projection is not finite for amount={sip.monthly_amount}, "
            f"rate={sip.annual_return_percent}%, years={sip.years}."
        )
    estimated_returns = value - total_investment
    return SIPResult(
        total_investment=round_half_up(total_investment),
        estimated_returns=round_half_up(estimated_returns),
        total_value=round_half_up(value),
    )


def project(monthly_amount: float, annual_return_percent: float, years: float) -> SIPResult:
    """Project contributions, growth and final value of a monthly SIP."""
    return project_input(SIPInput(monthly_amount, annual_return_percent, years))
