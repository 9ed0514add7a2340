from __future__ import annotations

from math import isclose

from investsim.core.fixed_income import project_monthly_series, simulate_fixed_income
from investsim.schemas.fixed_income import FixedIncomeInputs


def test_zero_inflation_leaves_real_view_empty_and_headline_nominal():
    """
    With zero inflation there is nothing to deflate: the monthly real view is omitted and the headline real value equals the nominal one.
    """
    inputs = FixedIncomeInputs(
        initial_value=1000.0,
        monthly_contribution=100.0,
        annual_interest_rate=6.0,
        annual_inflation_rate=0.0,
        time_in_years=2,
    )
    result = simulate_fixed_income(inputs)

    for point in result.monthly_data:
        assert point.inflation_adjusted is None
    assert isclose(result.inflation_adjusted_final_amount, result.final_amount)


def test_monthly_deflation_compounds_per_month():
    """
    A flat balance under 12% annual inflation loses 1% of purchasing power per month, compounded.
    """
    series = project_monthly_series(1000.0, 0.0, 0.0, 1, annual_inflation_rate=12.0)

    assert isclose(series[0].inflation_adjusted, 990.10, abs_tol=0.01)
    assert isclose(series[-1].inflation_adjusted, 887.45, abs_tol=0.01)
    for point in series:
        assert isclose(point.amount, 1000.0, abs_tol=0.0)
