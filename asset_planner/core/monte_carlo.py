"""
Monte Carlo orchestration of guardrail withdrawal runs.

Every run owns its own random.Random, seeded from a master generator, so a
batch depends only on the seed and not on how the runs are scheduled.
"""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Tuple

from asset_planner.core.rounding import round_half_up
from asset_planner.core.withdrawal import simulate_withdrawal_path
from asset_planner.schemas.withdrawal import (
    SimulationBatch,
    SimulationSummary,
    WithdrawalParameters,
    WithdrawalYearResult,
)

logger = logging.getLogger(__name__)

Run = List[WithdrawalYearResult]


def _run_seeds(count: int, seed: Optional[int]) -> List[int]:
    master = random.Random(seed)
    return [master.getrandbits(64) for _ in range(count)]


def _simulate_one(task: Tuple[float, WithdrawalParameters, int]) -> Run:
    # module level so it can be pickled into worker processes
    starting_value, params, run_seed = task
    return simulate_withdrawal_path(starting_value, params, random.Random(run_seed))


def run_monte_carlo(
    starting_value: float,
    params: WithdrawalParameters,
    seed: Optional[int] = None,
    max_workers: int = 1,
) -> SimulationBatch:
    """Run params.simulations independent paths from the same starting value.

    Args:
        starting_value: Balance at the start of retirement.
        params: Withdrawal plan shared by every run.
        seed: Fixes the batch for reproducible results. None draws fresh randomness.
        max_workers: Above 1, runs are fanned out over a process pool.

    Returns:
        SimulationBatch with runs in dispatch order.
    """
    tasks = [
        (starting_value, params, run_seed)
        for run_seed in _run_seeds(params.simulations, seed)
    ]

    if max_workers > 1 and len(tasks) > 1:
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            runs = list(executor.map(_simulate_one, tasks))
    else:
        runs = [_simulate_one(task) for task in tasks]

    batch = SimulationBatch(starting_value=starting_value, runs=runs)
    logger.info(
        "Ran %d withdrawal simulations over %d years from %.2f; success rate %d%%",
        len(runs),
        params.years,
        starting_value,
        success_rate(batch.runs),
    )
    return batch


def final_value(run: Run) -> float:
    """Balance recorded in the last year of a run; 0 for an empty run."""
    return run[-1].portfolio_value if run else 0.0


def final_values(runs: Sequence[Run]) -> List[float]:
    return [final_value(run) for run in runs]


def success_rate(runs: Sequence[Run]) -> int:
    """Percent of runs still holding money at the end, rounded to an integer."""
    if not runs:
        return 0
    successful = sum(1 for run in runs if run and run[-1].portfolio_value > 0)
    return round_half_up(successful / len(runs) * 100)


def median_final_value(runs: Sequence[Run]) -> float:
    """Lower median of the terminal balances."""
    values = sorted(final_values(runs))
    if not values:
        return 0.0
    return values[len(values) // 2]


def best_case(runs: Sequence[Run]) -> float:
    return max(final_values(runs), default=0.0)


def worst_case(runs: Sequence[Run]) -> float:
    return min(final_values(runs), default=0.0)


def summarize(runs: Sequence[Run]) -> SimulationSummary:
    return SimulationSummary(
        success_rate=success_rate(runs),
        median_final_value=median_final_value(runs),
        best_case=best_case(runs),
        worst_case=worst_case(runs),
    )
