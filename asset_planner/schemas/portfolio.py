"""Data contracts for portfolio holdings."""

from typing import List

from pydantic import BaseModel, Field


class Holding(BaseModel):
    """One line of the portfolio: a ticker held in some quantity."""

    ticker: str
    name: str = Field("", description="Free-form note shown next to the ticker.")
    quantity: float = Field(..., ge=0)
    price: float = Field(..., ge=0, description="Unit price in portfolio currency.")
    is_estimate: bool = Field(
        False,
        description="Price came from a fallback table instead of a live quote.",
    )


class PortfolioValueRequest(BaseModel):
    holdings: List[Holding] = Field(default_factory=list)


class HoldingValue(BaseModel):
    ticker: str
    value: float = Field(..., ge=0)


class PortfolioValueResponse(BaseModel):
    holdings: List[HoldingValue]
    total_value: float = Field(..., ge=0)
