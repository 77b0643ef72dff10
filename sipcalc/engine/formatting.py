from __future__ import annotations

from .projector import round_half_up

RUPEE = "₹"


def group_indian(digits: str) -> str:
    """Indian numbering groups: last three digits, then pairs (12,34,567)."""
    if len(digits) <= 3:
        return digits
    out = digits[-3:]
    rest = digits[:-3]
    while rest:
        out = rest[-2:] + "," + out
        rest = rest[:-2]
    return out


def format_inr(amount: float) -> str:
    """Whole-rupee display string, e.g. ``₹12,34,567``."""
    value = round_half_up(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{RUPEE}{group_indian(str(abs(value)))}"
