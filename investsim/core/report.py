"""Context for the printable consolidated portfolio report."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from investsim.core.formatting import format_currency, format_percent
from investsim.schemas.fixed_income import FixedIncomeInputs, FixedIncomeResult
from investsim.schemas.portfolio import ASSET_CLASS_LABELS, AssetClass, PortfolioSummary
from investsim.schemas.variable_income import VariableIncomeInputs, VariableIncomeResult


class ReportTile(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    value: str
    positive: bool = False


class ReportRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    initial_value: str
    final_value: str
    gains: str
    simple_return: str


def simple_return(final_value: float, initial_value: float) -> float:
    """Total return over the horizon in percent, 0 without an initial value."""
    if initial_value <= 0:
        return 0.0
    return (final_value / initial_value - 1) * 100


def _row(asset_class: AssetClass, initial: float, final: float, currency: str) -> ReportRow:
    return ReportRow(
        label=ASSET_CLASS_LABELS[asset_class],
        initial_value=format_currency(initial, currency),
        final_value=format_currency(final, currency),
        gains=format_currency(final - initial, currency),
        simple_return=format_percent(simple_return(final, initial), signed=True),
    )


def build_report(
    summary: PortfolioSummary,
    fixed_inputs: Optional[FixedIncomeInputs] = None,
    fixed_result: Optional[FixedIncomeResult] = None,
    variable_inputs: Optional[VariableIncomeInputs] = None,
    variable_result: Optional[VariableIncomeResult] = None,
    currency: str = "BRL",
    generated_on: Optional[date] = None,
    title: str = "Investment Report",
) -> Dict[str, Any]:
    """
    Assemble the template context for the printable report.

    Detail rows use a plain ``final / initial - 1`` return against the
    initial value, unlike the annualized figures of the summary.
    """
    tiles = [
        ReportTile(title="Total initial investment", value=format_currency(summary.initial_investment, currency)),
        ReportTile(title="Projected final value", value=format_currency(summary.final_value, currency)),
        ReportTile(
            title="Total gains",
            value=format_currency(summary.total_gains, currency),
            positive=summary.total_gains >= 0,
        ),
        ReportTile(
            title="Total return",
            value=format_percent(summary.gain_percentage, signed=True),
            positive=summary.gain_percentage >= 0,
        ),
        ReportTile(
            title="Monthly return",
            value=format_percent(summary.monthly_gain_percentage, signed=True),
            positive=summary.monthly_gain_percentage >= 0,
        ),
        ReportTile(
            title="Average monthly gains",
            value=format_currency(summary.monthly_average_income, currency),
        ),
    ]
    if summary.total_dividends > 0:
        tiles.append(
            ReportTile(
                title="Accumulated dividends",
                value=format_currency(summary.total_dividends, currency),
                positive=True,
            )
        )

    rows: List[ReportRow] = []
    if fixed_inputs is not None and fixed_result is not None and fixed_result.final_amount > 0:
        rows.append(
            _row(AssetClass.FIXED_INCOME, fixed_inputs.initial_value, fixed_result.final_amount, currency)
        )
        rows.append(
            _row(
                AssetClass.FIXED_INCOME_REAL,
                fixed_inputs.initial_value,
                fixed_result.inflation_adjusted_final_amount,
                currency,
            )
        )
    if (
        variable_inputs is not None
        and variable_result is not None
        and variable_result.total_after_period > 0
    ):
        rows.append(
            _row(
                AssetClass.VARIABLE_INCOME,
                variable_inputs.investment_amount,
                variable_result.total_after_period,
                currency,
            )
        )

    return {
        "title": title,
        "time_in_years": summary.time_in_years,
        "tiles": tiles,
        "rows": rows,
        "generated_on": (generated_on or date.today()).isoformat(),
    }
