from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from investcalc.models import DEFAULT_FREQUENCY, RECURRING_TYPES, InstrumentType, Investment

logger = logging.getLogger(__name__)

MAX_SANE_RATE = 50.0


class InvestmentValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass
class PreparationResult:
    investments: List[Investment]
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def check_investment(investment: Investment) -> Tuple[List[str], List[str]]:
    label = investment.name or investment.id
    errors: List[str] = []
    warnings: List[str] = []

    if not investment.name.strip():
        errors.append(f"{investment.id} name must not be empty")
    if not math.isfinite(investment.principal) or investment.principal <= 0:
        errors.append(f"{label} principal must be a positive number")
    if not math.isfinite(investment.rate):
        errors.append(f"{label} rate must be a finite number")
    elif investment.rate > MAX_SANE_RATE:
        warnings.append(f"{label} rate {investment.rate}% is above {MAX_SANE_RATE:g}%")
    if investment.time < 1:
        errors.append(f"{label} time must be at least 1 year")
    if investment.frequency is not None and investment.frequency <= 0:
        errors.append(f"{label} frequency must be positive")

    try:
        instrument = InstrumentType(investment.type)
    except ValueError:
        warnings.append(f"{label} unknown type {investment.type!r}, calculated as FD")
    else:
        # the form always sends the monthly default, only flag a deliberate choice
        custom_frequency = investment.frequency not in (None, DEFAULT_FREQUENCY)
        if custom_frequency and instrument not in RECURRING_TYPES:
            warnings.append(f"{label} frequency ignored for {instrument.value}")
        elif custom_frequency and instrument == InstrumentType.RD:
            warnings.append(f"{label} RD is always monthly, frequency ignored")

    return errors, warnings


def check_investments(investments: Iterable[Investment]) -> PreparationResult:
    result = PreparationResult(investments=list(investments))
    seen_ids = set()
    seen_names = set()
    for investment in result.investments:
        if investment.id in seen_ids:
            result.errors.append(f"duplicate investment id {investment.id}")
        seen_ids.add(investment.id)

        # names key the chart series, next to the "year" column
        name = investment.name.strip()
        if name == "year":
            result.errors.append('"year" is reserved and cannot be an investment name')
        elif name in seen_names:
            result.errors.append(f"duplicate investment name {name}")
        seen_names.add(name)

        errors, warnings = check_investment(investment)
        result.errors.extend(errors)
        result.warnings.extend(warnings)
    return result


def prepare_investments(investments: Iterable[Investment]) -> PreparationResult:
    preparation = check_investments(investments)
    if preparation.errors:
        logger.info("Rejected %d investment(s): %s", len(preparation.investments), preparation.errors)
        raise InvestmentValidationError(preparation.errors)
    return preparation
