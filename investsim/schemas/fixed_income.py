"""Data contracts for fixed-income (compound interest) simulations."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_YEARS = 50


class FixedIncomeInputs(BaseModel):
    """Inputs required to project a recurring-contribution investment."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initial_value: float = Field(..., ge=0, description="Amount invested at month 0.")
    monthly_contribution: float = Field(
        0.0,
        ge=0,
        description="Contribution added at the end of each month, after interest.",
    )
    annual_interest_rate: float = Field(
        ...,
        ge=0,
        description="Nominal annual interest rate in percent (e.g. 8 for 8%).",
    )
    annual_inflation_rate: float = Field(
        0.0,
        ge=0,
        description="Annual inflation rate in percent, used for the real-value view.",
    )
    time_in_years: int = Field(..., ge=1, le=MAX_YEARS, description="Number of years to project.")


class MonthlyDataPoint(BaseModel):
    """Single month of a fixed-income trajectory."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1)
    amount: float
    # cumulative: amount minus everything contributed so far
    interest: float
    contribution: float
    inflation_adjusted: Optional[float] = None


class FixedIncomeResult(BaseModel):
    """Projected fixed-income outcome."""

    model_config = ConfigDict(frozen=True)

    final_amount: float
    total_contributions: float
    total_interest: float
    inflation_adjusted_final_amount: float
    monthly_data: List[MonthlyDataPoint]

    @property
    def inflation_loss(self) -> float:
        return self.final_amount - self.inflation_adjusted_final_amount

    @property
    def inflation_impact_percentage(self) -> float:
        if self.final_amount == 0:
            return 0.0
        return self.inflation_loss / self.final_amount * 100

    @property
    def return_percentage(self) -> float:
        if self.total_contributions <= 0:
            return 0.0
        return (self.final_amount / self.total_contributions - 1) * 100


class FixedIncomeResponse(BaseModel):
    """API payload: the result plus its derived read-outs and chart points."""

    # not a FixedIncomeResult subclass: the read-outs there are properties, here fields
    final_amount: float
    total_contributions: float
    total_interest: float
    inflation_adjusted_final_amount: float
    inflation_loss: float
    inflation_impact_percentage: float
    return_percentage: float
    monthly_data: List[MonthlyDataPoint]
    chart: List[MonthlyDataPoint]
