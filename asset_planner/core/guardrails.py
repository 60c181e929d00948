"""Guyton-Klinger decision rules, checked in priority order."""

from typing import Dict

from asset_planner.schemas.withdrawal import GuardrailDecision

# Multiplier applied to this year's withdrawal to get next year's.
ADJUSTMENTS: Dict[GuardrailDecision, float] = {
    GuardrailDecision.UPPER: 0.9,
    GuardrailDecision.LOWER: 1.1,
    GuardrailDecision.INFLATION: 1.03,
    GuardrailDecision.NONE: 1.0,
}


def evaluate_guardrails(
    current_rate: float,
    initial_rate: float,
    upper_guardrail: float,
    lower_guardrail: float,
    portfolio_gained: bool,
) -> GuardrailDecision:
    """
    Pick the single rule that applies this year.

      1) Capital preservation: the rate rose more than upper_guardrail% above plan.
      2) Prosperity: the rate fell more than lower_guardrail% below plan.
      3) Inflation: neither fired and the portfolio grew this year.
      4) Otherwise spending stays flat.

    Rates are fractions (0.04 for 4%); the guardrails are percents.
    initial_rate is the plan's first-year rate and never moves.
    """
    if current_rate > initial_rate * (1 + upper_guardrail / 100):
        return GuardrailDecision.UPPER
    if current_rate < initial_rate * (1 - lower_guardrail / 100):
        return GuardrailDecision.LOWER
    if portfolio_gained:
        return GuardrailDecision.INFLATION
    return GuardrailDecision.NONE


def next_withdrawal(amount: float, decision: GuardrailDecision) -> float:
    return amount * ADJUSTMENTS[decision]
