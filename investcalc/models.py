from __future__ import annotations

from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_FREQUENCY = 12


class InstrumentType(str, Enum):
    FD = "FD"
    SIP = "SIP"
    PPF = "PPF"
    RD = "RD"
    NSC = "NSC"
    ELSS = "ELSS"


# principal is a per-period contribution for these, a lump sum for the rest
RECURRING_TYPES = frozenset({InstrumentType.SIP, InstrumentType.RD, InstrumentType.ELSS})


class Investment(BaseModel):
    """One instrument as entered by the user.

    ``type`` stays a plain string so that tags the engine does not know
    still calculate (as FD) instead of being rejected here.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    type: str = InstrumentType.FD.value
    principal: float
    rate: float
    time: int
    frequency: Optional[int] = None
    lockIn: Optional[int] = None
    taxBenefit: Optional[bool] = None

    @property
    def periods_per_year(self) -> int:
        return self.frequency or DEFAULT_FREQUENCY


class YearlyData(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    amount: float
    interest: float
    totalInvested: float


class InvestmentResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    investment: Investment
    maturityAmount: float
    totalInterest: float
    yearlyBreakdown: List[YearlyData] = Field(default_factory=list)
