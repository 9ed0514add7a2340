"""Data contracts for the consolidated portfolio view."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from investsim.schemas.fixed_income import MAX_YEARS, FixedIncomeInputs
from investsim.schemas.variable_income import VariableIncomeInputs


class AssetClass(str, Enum):
    FIXED_INCOME = "fixed_income"
    FIXED_INCOME_REAL = "fixed_income_real"
    VARIABLE_INCOME = "variable_income"


ASSET_CLASS_LABELS = {
    AssetClass.FIXED_INCOME: "Fixed income",
    AssetClass.FIXED_INCOME_REAL: "Fixed income (inflation-adjusted)",
    AssetClass.VARIABLE_INCOME: "Variable income",
}


class AssetClassReturn(BaseModel):
    """Performance row for one asset class."""

    model_config = ConfigDict(frozen=True)

    asset_class: AssetClass
    initial_value: float
    final_value: float
    annualized_return: float
    monthly_return: float


class DistributionSlice(BaseModel):
    """Share of the projected final value held by one asset class."""

    model_config = ConfigDict(frozen=True)

    asset_class: AssetClass
    value: float
    share: float = Field(..., ge=0, le=1)


class PortfolioSummary(BaseModel):
    """Consolidated metrics over whichever simulations were run.

    Rates (``annualized_return``, ``monthly_return``, ``share``) are decimal
    fractions; ``*_percentage`` fields are already multiplied by 100.
    """

    model_config = ConfigDict(frozen=True)

    time_in_years: int
    initial_investment: float = 0.0
    final_value: float = 0.0
    total_gains: float = 0.0
    gain_percentage: float = 0.0
    monthly_gain_percentage: float = 0.0
    total_income: float = 0.0
    monthly_average_income: float = 0.0
    total_dividends: float = 0.0
    monthly_average_dividends: float = 0.0
    returns: List[AssetClassReturn] = Field(default_factory=list)
    distribution: List[DistributionSlice] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.returns


class PortfolioRequest(BaseModel):
    """Inputs for a consolidated run; either component may be omitted."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    time_in_years: int = Field(..., ge=1, le=MAX_YEARS)
    fixed_income: Optional[FixedIncomeInputs] = None
    variable_income: Optional[VariableIncomeInputs] = None
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)

    @model_validator(mode="after")
    def ensure_shared_horizon(self) -> "PortfolioRequest":
        for label, component in (
            ("fixed_income", self.fixed_income),
            ("variable_income", self.variable_income),
        ):
            if component is not None and component.time_in_years != self.time_in_years:
                raise ValueError(
                    f"{label}.time_in_years must match time_in_years ({self.time_in_years})"
                )
        return self
