"""Data contracts for variable-income (dividend) simulations."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from investsim.schemas.fixed_income import MAX_YEARS


class VariableIncomeInputs(BaseModel):
    """Inputs required to project a dividend-paying equity position."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    investment_amount: float = Field(..., gt=0, description="Amount invested at year 0.")
    annual_dividend_yield: float = Field(
        ...,
        ge=0,
        description="Dividends paid per year as a percent of the start-of-year value.",
    )
    annual_growth: float = Field(
        ...,
        ge=0,
        description="Expected yearly appreciation of the position in percent.",
    )
    time_in_years: int = Field(..., ge=1, le=MAX_YEARS, description="Number of years to project.")
    reinvest_dividends: bool = Field(
        True,
        description="Add each year's dividend back into the position after growth.",
    )


class YearlyDataPoint(BaseModel):
    """Single year of a dividend trajectory."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1)
    # value at the start of the year, before growth and reinvestment
    investment_value: float
    dividend_amount: float
    accumulated_dividends: float


class VariableIncomeResult(BaseModel):
    """Projected dividend investment outcome."""

    model_config = ConfigDict(frozen=True)

    total_after_period: float
    total_dividends: float
    yearly_data: List[YearlyDataPoint]


class VariableIncomeResponse(VariableIncomeResult):
    growth_percentage: float
    dividend_yield_on_cost: float
