"""Rate conversion helpers."""


def annual_to_monthly_equivalent(annual_rate: float) -> float:
    """Return the monthly rate that compounds to ``annual_rate`` over 12 months.

    Both rates are decimal fractions (0.08 for 8%). Rates at or below -1 are
    outside the contract.
    """
    return (1 + annual_rate) ** (1 / 12) - 1
