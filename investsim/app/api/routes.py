"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from flask import Blueprint, current_app, jsonify, render_template, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import HTTPException

from investsim.core.charting import chart_points
from investsim.core.fixed_income import simulate_fixed_income
from investsim.core.ping import get_ping_message, get_version
from investsim.core.portfolio import summarize_portfolio
from investsim.core.report import build_report
from investsim.core.variable_income import (
    dividend_yield_on_cost,
    growth_percentage,
    simulate_variable_income,
)
from investsim.schemas.fixed_income import (
    FixedIncomeInputs,
    FixedIncomeResponse,
    FixedIncomeResult,
)
from investsim.schemas.ping import PingResponse
from investsim.schemas.portfolio import PortfolioRequest, PortfolioSummary
from investsim.schemas.variable_income import (
    VariableIncomeInputs,
    VariableIncomeResponse,
    VariableIncomeResult,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

M = TypeVar("M", bound=BaseModel)


class InvalidRequest(Exception):
    """The request body failed schema validation."""

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(f"{len(errors)} validation error(s)")
        self.errors = errors


@api_bp.errorhandler(InvalidRequest)
def _handle_invalid_request(exc: InvalidRequest):
    """Convert request validation errors into JSON responses."""
    return jsonify({"detail": exc.errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    """Report any calculation failure without leaking details to the client."""
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("calculation failed on %s", request.path)
    return jsonify({"detail": "calculation failed"}), HTTPStatus.INTERNAL_SERVER_ERROR


def _parse(model: Type[M]) -> M:
    payload = request.get_json(force=True, silent=False)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise InvalidRequest(errors) from exc


def _ensure_finite(value: Any) -> Any:
    """Reject results that overflowed; ``inf``/``nan`` are not valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("calculation produced a non-finite number")
    if isinstance(value, dict):
        for item in value.values():
            _ensure_finite(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _ensure_finite(item)
    return value


def _run_portfolio(
    portfolio_request: PortfolioRequest,
) -> Tuple[PortfolioSummary, Optional[FixedIncomeResult], Optional[VariableIncomeResult]]:
    fixed_result = None
    variable_result = None
    if portfolio_request.fixed_income is not None:
        fixed_result = simulate_fixed_income(portfolio_request.fixed_income)
    if portfolio_request.variable_income is not None:
        variable_result = simulate_variable_income(portfolio_request.variable_income)

    summary = summarize_portfolio(
        portfolio_request.time_in_years,
        fixed_inputs=portfolio_request.fixed_income,
        fixed_result=fixed_result,
        variable_inputs=portfolio_request.variable_income,
        variable_result=variable_result,
    )
    return summary, fixed_result, variable_result


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), version=get_version())
    return jsonify(response.model_dump())


@api_bp.post("/calc/fixed-income")
def fixed_income() -> Any:
    """Compound-interest projection with monthly contributions."""
    inputs = _parse(FixedIncomeInputs)
    result = simulate_fixed_income(inputs)
    logger.info(
        "fixed income: %d years at %.2f%%, final %.2f",
        inputs.time_in_years,
        inputs.annual_interest_rate,
        result.final_amount,
    )

    response = FixedIncomeResponse(
        **result.model_dump(),
        inflation_loss=result.inflation_loss,
        inflation_impact_percentage=result.inflation_impact_percentage,
        return_percentage=result.return_percentage,
        chart=chart_points(result.monthly_data),
    )
    return jsonify(_ensure_finite(response.model_dump()))


@api_bp.post("/calc/variable-income")
def variable_income() -> Any:
    """Dividend projection with optional reinvestment."""
    inputs = _parse(VariableIncomeInputs)
    result = simulate_variable_income(inputs)
    logger.info(
        "variable income: %d years, reinvest=%s, final %.2f",
        inputs.time_in_years,
        inputs.reinvest_dividends,
        result.total_after_period,
    )

    response = VariableIncomeResponse(
        **result.model_dump(),
        growth_percentage=growth_percentage(inputs, result),
        dividend_yield_on_cost=dividend_yield_on_cost(inputs, result),
    )
    return jsonify(_ensure_finite(response.model_dump()))


@api_bp.post("/calc/portfolio")
def portfolio() -> Any:
    """Consolidated view over whichever simulations were supplied."""
    portfolio_request = _parse(PortfolioRequest)
    summary, _, _ = _run_portfolio(portfolio_request)
    logger.info(
        "portfolio: %d asset classes, final %.2f",
        len(summary.distribution),
        summary.final_value,
    )
    return jsonify(_ensure_finite(summary.model_dump(mode="json")))


@api_bp.post("/report")
def report() -> Any:
    """Printable HTML report of the consolidated portfolio."""
    portfolio_request = _parse(PortfolioRequest)
    summary, fixed_result, variable_result = _run_portfolio(portfolio_request)
    _ensure_finite(summary.model_dump())

    settings = current_app.config["INVESTSIM_SETTINGS"]
    context = build_report(
        summary,
        fixed_inputs=portfolio_request.fixed_income,
        fixed_result=fixed_result,
        variable_inputs=portfolio_request.variable_income,
        variable_result=variable_result,
        currency=portfolio_request.currency or settings.CURRENCY,
        title=settings.REPORT_TITLE,
    )
    html = render_template(
        "report.html",
        autoprint=request.args.get("print", "0") == "1",
        **context,
    )
    return html, HTTPStatus.OK, {"Content-Type": "text/html; charset=utf-8"}
