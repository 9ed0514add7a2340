"""Compound-interest projection with a fixed monthly contribution."""

import logging
from typing import List

from investsim.schemas.fixed_income import (
    FixedIncomeInputs,
    FixedIncomeResult,
    MonthlyDataPoint,
)

logger = logging.getLogger(__name__)


def project_final_amount(
    initial_value: float,
    monthly_contribution: float,
    annual_interest_rate: float,
    time_in_years: int,
) -> float:
    """Balance after ``time_in_years * 12`` months, rounded to cents.

    Each month the balance earns interest first and the contribution is added
    afterwards, so a contribution never earns interest in its own month.
    """
    monthly_rate = annual_interest_rate / 100 / 12
    balance = initial_value
    for _ in range(time_in_years * 12):
        balance = balance * (1 + monthly_rate) + monthly_contribution
    return round(balance, 2)


def project_monthly_series(
    initial_value: float,
    monthly_contribution: float,
    annual_interest_rate: float,
    time_in_years: int,
    annual_inflation_rate: float = 0.0,
) -> List[MonthlyDataPoint]:
    """
    Month-by-month trajectory of the same iteration as project_final_amount.

    Every field is rounded on its own from the unrounded running values, so
    ``interest == amount - contribution`` only holds to a cent or so.
    The inflation-adjusted amount deflates by the monthly inflation rate
    compounded over the months elapsed; it is left empty without inflation.
    """
    monthly_rate = annual_interest_rate / 100 / 12
    monthly_inflation = annual_inflation_rate / 100 / 12

    balance = initial_value
    contributed = initial_value
    series: List[MonthlyDataPoint] = []

    for month in range(1, time_in_years * 12 + 1):
        balance = balance + balance * monthly_rate + monthly_contribution
        contributed += monthly_contribution

        real = None
        if annual_inflation_rate:
            real = round(balance / (1 + monthly_inflation) ** month, 2)

        series.append(
            MonthlyDataPoint(
                month=month,
                amount=round(balance, 2),
                interest=round(balance - contributed, 2),
                contribution=round(contributed, 2),
                inflation_adjusted=real,
            )
        )

    return series


def inflation_adjusted_amount(
    final_amount: float, annual_inflation_rate: float, time_in_years: int
) -> float:
    """Deflate ``final_amount`` by annual inflation compounded over the whole horizon.

    This is deliberately not the last point of the monthly series, which
    deflates month by month.
    """
    return final_amount / (1 + annual_inflation_rate / 100) ** time_in_years


def simulate_fixed_income(inputs: FixedIncomeInputs) -> FixedIncomeResult:
    """Run the full fixed-income projection for one set of inputs."""
    final_amount = project_final_amount(
        inputs.initial_value,
        inputs.monthly_contribution,
        inputs.annual_interest_rate,
        inputs.time_in_years,
    )
    monthly_data = project_monthly_series(
        inputs.initial_value,
        inputs.monthly_contribution,
        inputs.annual_interest_rate,
        inputs.time_in_years,
        inputs.annual_inflation_rate,
    )
    total_contributions = (
        inputs.initial_value + inputs.monthly_contribution * inputs.time_in_years * 12
    )
    logger.debug(
        "fixed income: %d months, final=%.2f contributed=%.2f",
        len(monthly_data),
        final_amount,
        total_contributions,
    )

    return FixedIncomeResult(
        final_amount=final_amount,
        total_contributions=total_contributions,
        total_interest=final_amount - total_contributions,
        inflation_adjusted_final_amount=inflation_adjusted_amount(
            final_amount, inputs.annual_inflation_rate, inputs.time_in_years
        ),
        monthly_data=monthly_data,
    )
