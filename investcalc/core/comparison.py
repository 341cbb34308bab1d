"""Chart-ready series built from a set of calculated investments."""

from __future__ import annotations

import math
from typing import Dict, List, Union

from pydantic import BaseModel

from investcalc.core.calculations import total_contributed
from investcalc.models import InvestmentResult

ChartValue = Union[int, float]


class ComparisonBar(BaseModel):
    name: str
    invested: float
    maturity: float
    interest: float


def _whole_rupees(value: float) -> ChartValue:
    # round() cannot convert inf or nan, those pass through unchanged
    return round(value) if math.isfinite(value) else value


def growth_series(results: List[InvestmentResult]) -> List[Dict[str, ChartValue]]:
    """
    One row per year, 1..longest horizon, shaped like ``{"year": 3, "<name>": amount}``.

    Investments that have already matured show 0 for the later years; their
    value is never carried forward or extrapolated. Series are keyed by name,
    so names must be unique and must not be ``"year"``; ``check_investments``
    rejects input that breaks this.
    """
    if not results:
        return []

    max_years = max(result.investment.time for result in results)
    by_year = [
        {row.year: row.amount for row in result.yearlyBreakdown}
        for result in results
    ]

    rows: List[Dict[str, ChartValue]] = []
    for year in range(1, max_years + 1):
        row: Dict[str, ChartValue] = {"year": year}
        for result, amounts in zip(results, by_year):
            amount = amounts.get(year) if year <= result.investment.time else None
            row[result.investment.name] = _whole_rupees(amount) if amount is not None else 0
        rows.append(row)
    return rows


def final_comparison(results: List[InvestmentResult]) -> List[ComparisonBar]:
    return [
        ComparisonBar(
            name=result.investment.name,
            invested=total_contributed(result.investment),
            maturity=_whole_rupees(result.maturityAmount),
            interest=_whole_rupees(result.totalInterest),
        )
        for result in results
    ]
