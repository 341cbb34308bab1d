"""Maturity projections for the supported investment instruments.

Every calculator is a pure function of an ``Investment``: no validation,
no state, no I/O. Out-of-range input produces degenerate numbers rather
than exceptions; checking input is the job of ``domain.investment``.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from investcalc.models import (
    RECURRING_TYPES,
    InstrumentType,
    Investment,
    InvestmentResult,
    YearlyData,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

Calculator = Callable[[Investment], InvestmentResult]


def _power(base: float, exponent: int) -> float:
    """``base ** exponent`` that saturates to an infinity instead of raising."""
    try:
        return base**exponent
    except (OverflowError, ZeroDivisionError):
        if base < 0 and exponent % 2:
            return float("-inf")
        return float("inf")


def _annuity_due_value(contribution: float, period_rate: float, periods: int) -> float:
    """Future value of ``periods`` contributions made at the start of each period."""
    if period_rate == 0:
        # limit of the formula below as the rate goes to zero
        return contribution * periods
    growth = _power(1 + period_rate, periods)
    return contribution * (growth - 1) / period_rate * (1 + period_rate)


def _rd_value(deposit: float, monthly_rate: float, months: int) -> float:
    # simple interest on each deposit for the months it stays in, not true compounding
    return deposit * months * (1 + monthly_rate) + deposit * (months * (months + 1) / 2) * monthly_rate


def _row(year: int, amount: float, invested: float) -> YearlyData:
    return YearlyData(year=year, amount=amount, interest=amount - invested, totalInvested=invested)


def calculate_fd(investment: Investment) -> InvestmentResult:
    """Lump sum compounded annually. Also used for NSC."""
    principal, time = investment.principal, investment.time
    factor = 1 + investment.rate / 100

    breakdown = [_row(year, principal * _power(factor, year), principal) for year in range(1, time + 1)]
    maturity = principal * _power(factor, time)

    return InvestmentResult(
        investment=investment,
        maturityAmount=maturity,
        totalInterest=maturity - principal,
        yearlyBreakdown=breakdown,
    )


def calculate_sip(investment: Investment) -> InvestmentResult:
    """
    Recurring contribution of ``principal`` every period, ``frequency`` periods
    a year (monthly when unset). Each contribution is made at the start of its
    period, so it earns interest for that period too. Also used for ELSS.
    """
    principal = investment.principal
    frequency = investment.periods_per_year
    period_rate = investment.rate / 100 / frequency
    total_periods = investment.time * frequency

    breakdown: List[YearlyData] = []
    for year in range(1, investment.time + 1):
        periods = year * frequency
        breakdown.append(
            _row(year, _annuity_due_value(principal, period_rate, periods), principal * periods)
        )

    maturity = _annuity_due_value(principal, period_rate, total_periods)
    return InvestmentResult(
        investment=investment,
        maturityAmount=maturity,
        totalInterest=maturity - principal * total_periods,
        yearlyBreakdown=breakdown,
    )


def calculate_ppf(investment: Investment) -> InvestmentResult:
    """
    Annual contribution at the start of each year, then that year's interest
    on the whole running balance.
    """
    principal = investment.principal
    factor = 1 + investment.rate / 100

    balance = 0.0
    breakdown: List[YearlyData] = []
    for year in range(1, investment.time + 1):
        balance = (balance + principal) * factor
        breakdown.append(_row(year, balance, principal * year))

    return InvestmentResult(
        investment=investment,
        maturityAmount=balance,
        totalInterest=balance - principal * investment.time,
        yearlyBreakdown=breakdown,
    )


def calculate_rd(investment: Investment) -> InvestmentResult:
    """Monthly recurring deposit. Always monthly, ``frequency`` is ignored."""
    principal = investment.principal
    monthly_rate = investment.rate / 100 / MONTHS_PER_YEAR
    total_months = investment.time * MONTHS_PER_YEAR

    breakdown: List[YearlyData] = []
    for year in range(1, investment.time + 1):
        months = year * MONTHS_PER_YEAR
        breakdown.append(_row(year, _rd_value(principal, monthly_rate, months), principal * months))

    maturity = _rd_value(principal, monthly_rate, total_months)
    return InvestmentResult(
        investment=investment,
        maturityAmount=maturity,
        totalInterest=maturity - principal * total_months,
        yearlyBreakdown=breakdown,
    )


CALCULATORS: Dict[InstrumentType, Calculator] = {
    InstrumentType.FD: calculate_fd,
    InstrumentType.NSC: calculate_fd,
    InstrumentType.SIP: calculate_sip,
    InstrumentType.ELSS: calculate_sip,
    InstrumentType.PPF: calculate_ppf,
    InstrumentType.RD: calculate_rd,
}


def resolve_instrument(type_tag: Optional[str]) -> InstrumentType:
    """Map a type tag onto a known instrument. Anything unrecognised is treated as FD."""
    try:
        return InstrumentType(type_tag)
    except ValueError:
        logger.debug("Unknown instrument type %r, calculating as FD", type_tag)
        return InstrumentType.FD


def total_contributed(investment: Investment) -> float:
    """Principal paid in over the whole horizon.

    FD and NSC take the lump sum once; PPF takes it again every year.
    """
    instrument = resolve_instrument(investment.type)
    if instrument in (InstrumentType.FD, InstrumentType.NSC):
        return investment.principal
    if instrument not in RECURRING_TYPES:
        return investment.principal * investment.time
    if instrument == InstrumentType.RD:
        return investment.principal * investment.time * MONTHS_PER_YEAR
    return investment.principal * investment.time * investment.periods_per_year


def calculate_investment(investment: Investment) -> InvestmentResult:
    """Run the calculator matching ``investment.type``."""
    return CALCULATORS[resolve_instrument(investment.type)](investment)


compute = calculate_investment


def calculate_all(investments: List[Investment]) -> List[InvestmentResult]:
    return [calculate_investment(investment) for investment in investments]


__all__ = [
    "CALCULATORS",
    "calculate_fd",
    "calculate_sip",
    "calculate_ppf",
    "calculate_rd",
    "calculate_investment",
    "calculate_all",
    "compute",
    "resolve_instrument",
    "total_contributed",
]
