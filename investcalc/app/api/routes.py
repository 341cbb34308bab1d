"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from investcalc.core.calculations import calculate_all, calculate_investment
from investcalc.core.comparison import final_comparison, growth_series
from investcalc.core.export import CSV_FILENAME, results_to_csv
from investcalc.core.summary import summarize
from investcalc.domain.investment import (
    InvestmentValidationError,
    PreparationResult,
    prepare_investments,
)
from investcalc.models import InstrumentType
from investcalc.schemas.health import PingResponse
from investcalc.schemas.instruments import list_instruments
from investcalc.schemas.investment import (
    CompareRequest,
    CompareResponse,
    InvestmentRequest,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvestmentValidationError)
def _handle_investment_error(exc: InvestmentValidationError):
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _prepare_comparison() -> PreparationResult:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CompareRequest.model_validate(raw_payload)

    limit = current_app.config["INVESTCALC"].max_investments
    if len(payload.investments) > limit:
        raise InvestmentValidationError([f"at most {limit} investments can be compared"])

    return prepare_investments(payload.to_investments())


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", instruments=[kind.value for kind in InstrumentType])
    return jsonify(response.model_dump())


@api_bp.get("/instruments")
def instruments() -> Any:
    """Instrument types the form offers, with suggested rates."""
    return jsonify([info.model_dump(mode="json") for info in list_instruments()])


@api_bp.post("/investments/calculate")
def calculate() -> Any:
    """Maturity and yearly breakdown for a single investment (live preview)."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = InvestmentRequest.model_validate(raw_payload)
    preparation = prepare_investments([payload.to_investment()])

    result = calculate_investment(preparation.investments[0])
    body = result.model_dump()
    body["warnings"] = preparation.warnings
    return jsonify(body)


@api_bp.post("/investments/compare")
def compare() -> Any:
    """Results plus chart series and table summary for a list of investments."""
    preparation = _prepare_comparison()
    results = calculate_all(preparation.investments)
    logger.info("Compared %d investment(s)", len(results))

    response = CompareResponse(
        results=results,
        growth=growth_series(results),
        comparison=final_comparison(results),
        summary=summarize(results),
        warnings=preparation.warnings,
    )
    return jsonify(response.model_dump())


@api_bp.post("/investments/export")
def export_csv() -> Response:
    """Download the summary sheet as CSV."""
    preparation = _prepare_comparison()
    results = calculate_all(preparation.investments)
    return Response(
        results_to_csv(results),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={CSV_FILENAME}"},
    )
