"""Accumulate-then-withdraw pipeline used by the "run simulation" flow."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from asset_planner.core.monte_carlo import run_monte_carlo, summarize
from asset_planner.core.portfolio import total_monthly_contribution, total_value
from asset_planner.core.projection import project_growth, terminal_value
from asset_planner.schemas.plan import PlanResult
from asset_planner.schemas.portfolio import Holding
from asset_planner.schemas.projection import ProjectionParameters, YearlySnapshot
from asset_planner.schemas.withdrawal import WithdrawalParameters

logger = logging.getLogger(__name__)


def resolve_starting_value(
    current_value: float,
    snapshots: List[YearlySnapshot],
    years: int,
) -> float:
    """Retirement starts from the projected total, or from today when nothing is projected."""
    if years == 0:
        return current_value
    return float(terminal_value(snapshots))


def run_plan(
    holdings: Sequence[Holding],
    projection: ProjectionParameters,
    withdrawal: WithdrawalParameters,
    seed: Optional[int] = None,
    max_workers: int = 1,
) -> PlanResult:
    current = total_value(holdings)
    snapshots = project_growth(current, projection)
    starting_value = resolve_starting_value(current, snapshots, projection.years)

    logger.info(
        "Planning from current value %.2f; withdrawals start at %.2f after %d years",
        current,
        starting_value,
        projection.years,
    )

    batch = run_monte_carlo(starting_value, withdrawal, seed=seed, max_workers=max_workers)

    return PlanResult(
        current_value=current,
        total_monthly_contribution=total_monthly_contribution(projection.strategies),
        snapshots=snapshots,
        starting_value=starting_value,
        runs=batch.runs,
        summary=summarize(batch.runs),
    )
