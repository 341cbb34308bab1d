"""Display metrics for the results table. Recomputed freely, never stored."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from investcalc.core.calculations import total_contributed
from investcalc.models import InvestmentResult


class SummaryRow(BaseModel):
    id: str
    name: str
    type: str
    principal: float
    rate: float
    time: int
    totalInvested: float
    maturityAmount: float
    totalInterest: float
    totalReturnPct: float


class Highlight(BaseModel):
    name: str
    value: float


class ResultsSummary(BaseModel):
    rows: List[SummaryRow]
    bestMaturity: Optional[Highlight] = None
    highestRate: Optional[Highlight] = None
    totalInterest: float = 0.0


def total_return_pct(result: InvestmentResult) -> float:
    """Interest as a percentage of everything paid in.

    FD and NSC count their lump sum once (``total_contributed``), so their
    percentage is over ``principal`` rather than ``principal * time``.
    """
    invested = total_contributed(result.investment)
    if invested == 0:
        return 0.0
    return result.totalInterest / invested * 100


def summarize(results: List[InvestmentResult]) -> ResultsSummary:
    rows = [
        SummaryRow(
            id=result.investment.id,
            name=result.investment.name,
            type=result.investment.type,
            principal=result.investment.principal,
            rate=result.investment.rate,
            time=result.investment.time,
            totalInvested=total_contributed(result.investment),
            maturityAmount=result.maturityAmount,
            totalInterest=result.totalInterest,
            totalReturnPct=total_return_pct(result),
        )
        for result in results
    ]
    if not results:
        return ResultsSummary(rows=rows)

    # max() keeps the first of equal values, same as the table shows them
    best = max(results, key=lambda result: result.maturityAmount)
    top_rate = max(results, key=lambda result: result.investment.rate)

    return ResultsSummary(
        rows=rows,
        bestMaturity=Highlight(name=best.investment.name, value=best.maturityAmount),
        highestRate=Highlight(name=top_rate.investment.name, value=top_rate.investment.rate),
        totalInterest=sum(result.totalInterest for result in results),
    )
