import math

import pandas as pd

from .projector import project

SCHEDULE_COLUMNS = ["Year", "Invested", "Value", "Returns"]


def _checkpoints(years: float) -> list[float]:
    whole_years = int(math.floor(years)) if years > 0 else 0
    points = [float(year) for year in range(1, whole_years + 1)]
    if years > whole_years:
        points.append(float(years))
    return points


def projection_schedule(monthly_amount: float, annual_return_percent: float, years: float) -> pd.DataFrame:
    """Year-by-year accumulation of a SIP, ending with a partial year if any."""
    records = []
    for point in _checkpoints(years):
        result = project(monthly_amount, annual_return_percent, point)
        records.append(
            {
                "Year": point,
                "Invested": result.total_investment,
                "Value": result.total_value,
                "Returns": result.estimated_returns,
            }
        )
    return pd.DataFrame(records, columns=SCHEDULE_COLUMNS)


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = set(SCHEDULE_COLUMNS).difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values("Year").copy()


def aggregate_schedule(df: pd.DataFrame, freq: str = "Y") -> pd.DataFrame:
    """Collapse a yearly schedule to one row per year or per five years."""
    if df.empty:
        return df

    freq = (freq or "Y").upper()
    df = _prepare(df)

    if freq == "5Y":
        df["PeriodValue"] = df["Year"].apply(lambda year: math.ceil(year / 5))
        grouped = df.groupby("PeriodValue", as_index=False).last()
        return grouped.drop(columns="PeriodValue")[SCHEDULE_COLUMNS]

    return df.reset_index(drop=True)
