"""Data contracts for the investment endpoints."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from investcalc.core.comparison import ChartValue, ComparisonBar
from investcalc.core.summary import ResultsSummary
from investcalc.models import InstrumentType, Investment, InvestmentResult
from investcalc.schemas.instruments import default_rate

# 100 crore; keeps every projection within the 50% / 50 year form limits finite
MAX_PRINCIPAL = 1_000_000_000


class InvestmentRequest(BaseModel):
    """One investment as submitted by the form."""

    model_config = ConfigDict(extra="forbid")

    id: Optional[str] = Field(None, min_length=1, description="Client-side id; generated when omitted.")
    name: str = Field(..., min_length=1, max_length=120)
    type: InstrumentType = InstrumentType.FD
    principal: float = Field(
        ...,
        gt=0,
        le=MAX_PRINCIPAL,
        allow_inf_nan=False,
        description="Lump sum, or the per-period amount for SIP/RD/ELSS.",
    )
    rate: Optional[float] = Field(
        None,
        ge=0,
        le=50,
        allow_inf_nan=False,
        description="Annual rate in percent; the instrument's default when omitted.",
    )
    time: int = Field(..., ge=1, le=50, description="Horizon in whole years.")
    frequency: Optional[int] = Field(None, ge=1, le=365)
    lockIn: Optional[int] = Field(None, ge=0, le=50)
    taxBenefit: Optional[bool] = None

    @model_validator(mode="after")
    def ensure_name(self) -> "InvestmentRequest":
        if not self.name.strip():
            raise ValueError("name must not be blank")
        return self

    def to_investment(self) -> Investment:
        fields = self.model_dump(exclude_none=True)
        fields["type"] = self.type.value
        fields["name"] = self.name.strip()
        if self.rate is None:
            fields["rate"] = default_rate(self.type)
        return Investment(**fields)


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    investments: List[InvestmentRequest] = Field(default_factory=list)

    def to_investments(self) -> List[Investment]:
        return [item.to_investment() for item in self.investments]


class CompareResponse(BaseModel):
    results: List[InvestmentResult]
    growth: List[Dict[str, ChartValue]]
    comparison: List[ComparisonBar]
    summary: ResultsSummary
    warnings: List[str] = Field(default_factory=list)
