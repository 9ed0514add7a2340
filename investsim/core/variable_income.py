"""Dividend projection for an equity position with optional reinvestment."""

import logging
from typing import List

from investsim.schemas.variable_income import (
    VariableIncomeInputs,
    VariableIncomeResult,
    YearlyDataPoint,
)

logger = logging.getLogger(__name__)


def project_dividend_investment(
    investment_amount: float,
    annual_dividend_yield: float,
    annual_growth: float,
    time_in_years: int,
    reinvest_dividends: bool,
) -> VariableIncomeResult:
    """
    Build a year-by-year dividend table.

    Order of operations (per year):
      1) Dividend = start-of-year value * yield.
      2) Record the row with the pre-growth value and the running dividend total.
      3) Apply growth to the value.
      4) If reinvesting, add the dividend after growth.

    ``total_after_period`` is the value after the last year's step 3/4, so it
    is one step ahead of the last recorded ``investment_value``.
    """
    current_value = float(investment_amount)
    accumulated = 0.0
    rows: List[YearlyDataPoint] = []

    for year in range(1, time_in_years + 1):
        dividend = current_value * (annual_dividend_yield / 100)
        accumulated += dividend

        rows.append(
            YearlyDataPoint(
                year=year,
                investment_value=round(current_value, 2),
                dividend_amount=round(dividend, 2),
                accumulated_dividends=round(accumulated, 2),
            )
        )

        current_value *= 1 + annual_growth / 100
        if reinvest_dividends:
            current_value += dividend

    return VariableIncomeResult(
        total_after_period=round(current_value, 2),
        total_dividends=round(accumulated, 2),
        yearly_data=rows,
    )


def simulate_variable_income(inputs: VariableIncomeInputs) -> VariableIncomeResult:
    """Run the dividend projection for one set of inputs."""
    result = project_dividend_investment(
        inputs.investment_amount,
        inputs.annual_dividend_yield,
        inputs.annual_growth,
        inputs.time_in_years,
        inputs.reinvest_dividends,
    )
    logger.debug(
        "variable income: %d years, final=%.2f dividends=%.2f reinvest=%s",
        len(result.yearly_data),
        result.total_after_period,
        result.total_dividends,
        inputs.reinvest_dividends,
    )
    return result


def growth_percentage(inputs: VariableIncomeInputs, result: VariableIncomeResult) -> float:
    if inputs.investment_amount <= 0:
        return 0.0
    return (result.total_after_period / inputs.investment_amount - 1) * 100


def dividend_yield_on_cost(inputs: VariableIncomeInputs, result: VariableIncomeResult) -> float:
    """Total dividends received as a percent of the amount first invested."""
    if inputs.investment_amount <= 0:
        return 0.0
    return result.total_dividends / inputs.investment_amount * 100
