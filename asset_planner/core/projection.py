from __future__ import annotations

import logging
from typing import List, Union

from asset_planner.core.rounding import round_half_up
from asset_planner.schemas.projection import ProjectionParameters, YearlySnapshot

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def _snapshot(year: int, total: float, principal: float) -> YearlySnapshot:
    rounded_total = round_half_up(total)
    rounded_principal = round_half_up(principal)
    return YearlySnapshot(
        year=year,
        principal=rounded_principal,
        growth=rounded_total - rounded_principal,
        total=rounded_total,
    )


def project_growth(starting_value: float, params: ProjectionParameters) -> List[YearlySnapshot]:
    """
    Build a year-by-year table from year 0 (now) through params.years (inclusive).

    The current holdings and every contribution strategy compound separately:
      - the starting value grows at initial_return_rate and never receives contributions
      - each strategy starts at 0 and only ever grows at its own rate

    Order of operations (per month):
      1) Grow the starting balance.
      2) For each strategy, in list order: add its contribution, then apply that
         month's growth (the contribution earns the month it was made in).

    Balances are never rounded; only the snapshot rows are.
    """
    rows: List[YearlySnapshot] = [_snapshot(0, starting_value, starting_value)]

    monthly_rate_initial = params.initial_return_rate / 100 / MONTHS_PER_YEAR
    monthly_rates = [s.return_rate / 100 / MONTHS_PER_YEAR for s in params.strategies]

    initial_balance = float(starting_value)
    strategy_balances = [0.0 for _ in params.strategies]

    initial_principal = float(starting_value)
    contributed_principal = 0.0

    for year in range(1, params.years + 1):
        for _ in range(MONTHS_PER_YEAR):
            initial_balance *= 1 + monthly_rate_initial

            for index, strategy in enumerate(params.strategies):
                strategy_balances[index] += strategy.monthly_amount
                contributed_principal += strategy.monthly_amount
                strategy_balances[index] *= 1 + monthly_rates[index]

        total = initial_balance + sum(strategy_balances)
        principal = initial_principal + contributed_principal
        rows.append(_snapshot(year, total, principal))

    logger.debug(
        "Projected %d years across %d strategies; final total %s",
        params.years,
        len(params.strategies),
        rows[-1].total,
    )
    return rows


def terminal_value(snapshots: List[YearlySnapshot]) -> Union[int, float]:
    """Total of the last projected year."""
    return snapshots[-1].total
