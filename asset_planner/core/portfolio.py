"""Current portfolio valuation."""

from typing import Iterable

from asset_planner.schemas.portfolio import (
    Holding,
    HoldingValue,
    PortfolioValueRequest,
    PortfolioValueResponse,
)
from asset_planner.schemas.projection import ContributionStrategy


def holding_value(holding: Holding) -> float:
    return holding.quantity * holding.price


def total_value(holdings: Iterable[Holding]) -> float:
    """Sum quantity x price across holdings; an empty portfolio is worth 0."""
    return sum((holding_value(holding) for holding in holdings), 0.0)


def total_monthly_contribution(strategies: Iterable[ContributionStrategy]) -> float:
    return sum((strategy.monthly_amount for strategy in strategies), 0.0)


def value_portfolio(request: PortfolioValueRequest) -> PortfolioValueResponse:
    """Break the portfolio down per holding alongside its total."""
    lines = [
        HoldingValue(ticker=holding.ticker, value=holding_value(holding))
        for holding in request.holdings
    ]
    return PortfolioValueResponse(holdings=lines, total_value=total_value(request.holdings))
