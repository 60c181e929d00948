"""Numeric engines: valuation, projection and guardrail withdrawals."""

from asset_planner.core.guardrails import evaluate_guardrails, next_withdrawal
from asset_planner.core.monte_carlo import (
    best_case,
    median_final_value,
    run_monte_carlo,
    success_rate,
    summarize,
    worst_case,
)
from asset_planner.core.planner import resolve_starting_value, run_plan
from asset_planner.core.portfolio import holding_value, total_monthly_contribution, total_value
from asset_planner.core.projection import project_growth, terminal_value
from asset_planner.core.sampling import normal_return
from asset_planner.core.withdrawal import simulate_withdrawal_path

__all__ = [
    "best_case",
    "evaluate_guardrails",
    "holding_value",
    "median_final_value",
    "next_withdrawal",
    "normal_return",
    "project_growth",
    "resolve_starting_value",
    "run_monte_carlo",
    "run_plan",
    "simulate_withdrawal_path",
    "success_rate",
    "summarize",
    "terminal_value",
    "total_monthly_contribution",
    "total_value",
    "worst_case",
]
