from __future__ import annotations

import logging
import math
import random
from typing import List, Optional

from asset_planner.core.guardrails import evaluate_guardrails, next_withdrawal
from asset_planner.core.sampling import normal_return
from asset_planner.schemas.withdrawal import (
    GuardrailDecision,
    WithdrawalParameters,
    WithdrawalYearResult,
)

logger = logging.getLogger(__name__)


def _withdrawal_rate(amount: float, balance: float) -> float:
    """amount / balance with IEEE semantics when the balance is exactly zero."""
    if balance == 0:
        if amount == 0:
            return math.nan
        return math.copysign(math.inf, amount) * math.copysign(1.0, balance)
    return amount / balance


def simulate_withdrawal_path(
    starting_value: float,
    params: WithdrawalParameters,
    rng: Optional[random.Random] = None,
) -> List[WithdrawalYearResult]:
    """
    Simulate one retirement under the Guyton-Klinger rules.

    Order of operations (per year):
      1) Withdraw this year's amount at the START of the year.
      2) Apply one sampled market return to what is left.
      3) Compare amount / post-growth balance with the plan's initial rate and
         decide next year's amount (see guardrails.evaluate_guardrails).
      4) Record the year; stop once the balance is gone.

    The returned list is shorter than params.years when the portfolio depletes.
    """
    rng = rng or random.Random()

    portfolio_value = float(starting_value)
    withdrawal_amount = starting_value * (params.initial_rate / 100)
    initial_withdrawal_rate = params.initial_rate / 100

    mean = params.expected_return / 100
    std_dev = params.volatility / 100

    rows: List[WithdrawalYearResult] = []
    for year in range(1, params.years + 1):
        portfolio_value -= withdrawal_amount

        annual_return = normal_return(mean, std_dev, rng)
        previous_value = portfolio_value
        portfolio_value *= 1 + annual_return
        portfolio_gained = portfolio_value > previous_value

        current_rate = _withdrawal_rate(withdrawal_amount, portfolio_value)

        decision = evaluate_guardrails(
            current_rate,
            initial_withdrawal_rate,
            params.upper_guardrail,
            params.lower_guardrail,
            portfolio_gained,
        )

        rows.append(
            WithdrawalYearResult(
                year=year,
                portfolio_value=max(0.0, portfolio_value),
                withdrawal_amount=withdrawal_amount,
                withdrawal_rate=current_rate * 100,
                return_rate=annual_return * 100,
                inflation_adjusted=decision is GuardrailDecision.INFLATION,
                guardrail_triggered=(
                    decision.value
                    if decision in (GuardrailDecision.UPPER, GuardrailDecision.LOWER)
                    else None
                ),
            )
        )

        withdrawal_amount = next_withdrawal(withdrawal_amount, decision)

        if portfolio_value <= 0:
            logger.debug("Portfolio depleted in year %d of %d", year, params.years)
            break

    return rows
