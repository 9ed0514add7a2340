from __future__ import annotations

from math import isclose

from investsim.core.fixed_income import project_final_amount, project_monthly_series


def test_zero_rate_accumulates_contributions_only():
    """
    With a zero interest rate, the balance is the initial value plus every contribution (no growth boost)
    """
    final = project_final_amount(1000.0, 250.0, 0.0, 3)
    assert isclose(final, 1000.0 + 250.0 * 36, abs_tol=0.01)

    series = project_monthly_series(1000.0, 250.0, 0.0, 3)
    prev = 0.0
    for point in series:
        assert isclose(point.amount, point.contribution, abs_tol=0.01)
        assert isclose(point.interest, 0.0, abs_tol=0.0)
        assert point.amount >= prev, "balance should not decrease with contributions only"
        prev = point.amount


def test_all_zero_inputs_stay_zero():
    """
    Sanity check: no money and no rate keeps every field at zero.
    """
    series = project_monthly_series(0.0, 0.0, 0.0, 1)
    assert series, "projection should return at least one month"
    #just check all are zeros, don't need to go line by line
    for point in series:
        assert isclose(point.amount, 0.0, abs_tol=0.0)
        assert isclose(point.interest, 0.0, abs_tol=0.0)
        assert isclose(point.contribution, 0.0, abs_tol=0.0)
    assert project_final_amount(0.0, 0.0, 0.0, 1) == 0.0
