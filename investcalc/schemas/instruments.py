"""Static catalogue of the instruments the form offers."""

from typing import Dict, List

from pydantic import BaseModel, Field

from investcalc.models import RECURRING_TYPES, InstrumentType


class InstrumentInfo(BaseModel):
    type: InstrumentType
    label: str
    defaultRate: float = Field(..., description="Suggested annual rate in percent.")
    recurring: bool = Field(
        ...,
        description="True when principal is a per-period contribution rather than a lump sum.",
    )


_CATALOGUE = [
    (InstrumentType.FD, "Fixed Deposit (FD)", 6.5),
    (InstrumentType.SIP, "Systematic Investment Plan (SIP)", 12.0),
    (InstrumentType.PPF, "Public Provident Fund (PPF)", 7.1),
    (InstrumentType.RD, "Recurring Deposit (RD)", 6.0),
    (InstrumentType.NSC, "National Savings Certificate (NSC)", 6.8),
    (InstrumentType.ELSS, "Equity Linked Savings Scheme (ELSS)", 15.0),
]

INSTRUMENTS: Dict[InstrumentType, InstrumentInfo] = {
    kind: InstrumentInfo(type=kind, label=label, defaultRate=rate, recurring=kind in RECURRING_TYPES)
    for kind, label, rate in _CATALOGUE
}


def list_instruments() -> List[InstrumentInfo]:
    return list(INSTRUMENTS.values())


def default_rate(kind: InstrumentType) -> float:
    return INSTRUMENTS[kind].defaultRate
