"""Consolidate fixed- and variable-income results into one portfolio view."""

from __future__ import annotations

import logging
from typing import List, Optional

from investsim.core.rates import annual_to_monthly_equivalent
from investsim.schemas.fixed_income import FixedIncomeInputs, FixedIncomeResult
from investsim.schemas.portfolio import (
    AssetClass,
    AssetClassReturn,
    DistributionSlice,
    PortfolioSummary,
)
from investsim.schemas.variable_income import VariableIncomeInputs, VariableIncomeResult

logger = logging.getLogger(__name__)


def annualized_return(final_value: float, base_value: float, time_in_years: int) -> float:
    """Constant yearly rate growing ``base_value`` into ``final_value``.

    Returns 0 when the base or the horizon is not positive.
    """
    if base_value <= 0 or time_in_years <= 0:
        return 0.0
    return (final_value / base_value) ** (1 / time_in_years) - 1


def _return_row(
    asset_class: AssetClass,
    initial_value: float,
    final_value: float,
    base_value: float,
    time_in_years: int,
) -> AssetClassReturn:
    annual = annualized_return(final_value, base_value, time_in_years)
    return AssetClassReturn(
        asset_class=asset_class,
        initial_value=initial_value,
        final_value=final_value,
        annualized_return=annual,
        monthly_return=annual_to_monthly_equivalent(annual),
    )


def summarize_portfolio(
    time_in_years: int,
    fixed_inputs: Optional[FixedIncomeInputs] = None,
    fixed_result: Optional[FixedIncomeResult] = None,
    variable_inputs: Optional[VariableIncomeInputs] = None,
    variable_result: Optional[VariableIncomeResult] = None,
) -> PortfolioSummary:
    """
    Combine whichever simulations were run into a PortfolioSummary.

    A class counts as present only when both its inputs and its result are
    given. Absent classes add exactly zero to every sum and are left out of
    the return and distribution lists.

    Annualized returns use different bases on purpose:
      - fixed income: total contributed (initial value + every monthly deposit)
      - variable income: the initial investment
    """
    has_fixed = fixed_inputs is not None and fixed_result is not None
    has_variable = variable_inputs is not None and variable_result is not None

    if not has_fixed and not has_variable:
        return PortfolioSummary(time_in_years=time_in_years)

    initial_investment = 0.0
    final_value = 0.0
    total_income = 0.0
    total_dividends = 0.0
    returns: List[AssetClassReturn] = []
    values: List[tuple[AssetClass, float]] = []

    if has_fixed:
        initial_investment += fixed_inputs.initial_value
        final_value += fixed_result.final_amount
        total_income += fixed_result.total_interest
        returns.append(
            _return_row(
                AssetClass.FIXED_INCOME,
                fixed_inputs.initial_value,
                fixed_result.final_amount,
                fixed_result.total_contributions,
                time_in_years,
            )
        )
        values.append((AssetClass.FIXED_INCOME, fixed_result.final_amount))

    if has_variable:
        initial_investment += variable_inputs.investment_amount
        final_value += variable_result.total_after_period
        total_dividends = variable_result.total_dividends
        total_income += total_dividends + (
            variable_result.total_after_period - variable_inputs.investment_amount
        )
        returns.append(
            _return_row(
                AssetClass.VARIABLE_INCOME,
                variable_inputs.investment_amount,
                variable_result.total_after_period,
                variable_inputs.investment_amount,
                time_in_years,
            )
        )
        values.append((AssetClass.VARIABLE_INCOME, variable_result.total_after_period))

    if has_fixed:
        returns.append(
            _return_row(
                AssetClass.FIXED_INCOME_REAL,
                fixed_inputs.initial_value,
                fixed_result.inflation_adjusted_final_amount,
                fixed_result.total_contributions,
                time_in_years,
            )
        )

    total_gains = final_value - initial_investment
    gain_percentage = total_gains / initial_investment * 100 if initial_investment > 0 else 0.0
    months = time_in_years * 12

    distribution = [
        DistributionSlice(asset_class=asset_class, value=value, share=value / final_value)
        for asset_class, value in values
        if value > 0
    ]

    logger.debug(
        "portfolio: initial=%.2f final=%.2f classes=%s",
        initial_investment,
        final_value,
        [row.asset_class.value for row in returns],
    )

    return PortfolioSummary(
        time_in_years=time_in_years,
        initial_investment=initial_investment,
        final_value=final_value,
        total_gains=total_gains,
        gain_percentage=gain_percentage,
        monthly_gain_percentage=annual_to_monthly_equivalent(gain_percentage / 100) * 100,
        total_income=total_income,
        monthly_average_income=total_income / months if months > 0 else 0.0,
        total_dividends=total_dividends,
        monthly_average_dividends=total_dividends / months if months > 0 else 0.0,
        returns=returns,
        distribution=distribution,
    )
