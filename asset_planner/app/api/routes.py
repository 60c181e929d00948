"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from asset_planner.config import Settings
from asset_planner.core.monte_carlo import run_monte_carlo, summarize
from asset_planner.core.ping import get_ping
from asset_planner.core.planner import run_plan
from asset_planner.core.portfolio import total_monthly_contribution, value_portfolio
from asset_planner.core.projection import project_growth
from asset_planner.schemas.plan import PlanRequest
from asset_planner.schemas.portfolio import PortfolioValueRequest
from asset_planner.schemas.projection import (
    ProjectionParameters,
    ProjectionRequest,
    ProjectionResponse,
)
from asset_planner.schemas.withdrawal import (
    SimulationRequest,
    SimulationResponse,
    WithdrawalParameters,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _settings() -> Settings:
    return current_app.config["PLANNER_SETTINGS"]


def _payload() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise BadRequest("request body must be a JSON object")
    return raw_payload


def _json(model: BaseModel, status: int = HTTPStatus.OK):
    # model_dump_json writes non-finite floats as null; jsonify would emit Infinity
    return current_app.response_class(model.model_dump_json(), mimetype="application/json"), status


def _over_limit(loc: List[str], value: int, limit: int) -> Optional[Dict[str, Any]]:
    if value <= limit:
        return None
    return {"loc": loc, "msg": f"{loc[-1]} must be at most {limit}"}


def _reject_oversized(
    withdrawal: Optional[WithdrawalParameters] = None,
    projection: Optional[ProjectionParameters] = None,
) -> Optional[Any]:
    """Refuse batches and horizons above the configured limits."""
    settings = _settings()
    errors = []
    if projection is not None:
        errors.append(_over_limit(["projection", "years"], projection.years, settings.max_years))
    if withdrawal is not None:
        errors.append(_over_limit(["withdrawal", "years"], withdrawal.years, settings.max_years))
        errors.append(
            _over_limit(["withdrawal", "simulations"], withdrawal.simulations, settings.max_simulations)
        )
    errors = [error for error in errors if error]
    if not errors:
        return None
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


def _seed(requested: Optional[int]) -> Optional[int]:
    return requested if requested is not None else _settings().random_seed


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = get_ping()
    return jsonify(response.model_dump())


@api_bp.post("/portfolio/value")
def portfolio_value() -> Any:
    """Value every holding and the portfolio as a whole."""
    payload = PortfolioValueRequest.model_validate(_payload())
    return _json(value_portfolio(payload))


@api_bp.post("/projection")
def projection() -> Any:
    """Return the year-by-year compound growth table."""
    payload = ProjectionRequest.model_validate(_payload())
    rejected = _reject_oversized(projection=payload.params)
    if rejected:
        return rejected

    snapshots = project_growth(payload.starting_value, payload.params)
    response = ProjectionResponse(
        snapshots=snapshots,
        final=snapshots[-1],
        total_monthly_contribution=total_monthly_contribution(payload.params.strategies),
    )
    return _json(response)


@api_bp.post("/withdrawal/simulate")
def withdrawal_simulation() -> Any:
    """Run the Guyton-Klinger Monte Carlo batch from a given balance."""
    payload = SimulationRequest.model_validate(_payload())
    rejected = _reject_oversized(withdrawal=payload.params)
    if rejected:
        return rejected

    batch = run_monte_carlo(
        payload.starting_value,
        payload.params,
        seed=_seed(payload.seed),
        max_workers=_settings().simulation_workers,
    )
    response = SimulationResponse(
        starting_value=batch.starting_value,
        runs=batch.runs,
        summary=summarize(batch.runs),
    )
    return _json(response)


@api_bp.post("/plan")
def plan() -> Any:
    """Value holdings, project them forward, then simulate retirement withdrawals."""
    payload = PlanRequest.model_validate(_payload())
    rejected = _reject_oversized(withdrawal=payload.withdrawal, projection=payload.projection)
    if rejected:
        return rejected

    result = run_plan(
        payload.holdings,
        payload.projection,
        payload.withdrawal,
        seed=_seed(payload.seed),
        max_workers=_settings().simulation_workers,
    )
    return _json(result)
