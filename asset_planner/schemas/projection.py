"""Data contracts for the compound growth projection."""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class ContributionStrategy(BaseModel):
    """A monthly contribution compounding at its own annual rate."""

    name: str = ""
    monthly_amount: float = Field(0.0, ge=0, description="Contribution added every month.")
    return_rate: float = Field(
        0.0,
        description="Annual return rate expressed as a percent (e.g. 7 for 7%).",
    )


def _default_strategies() -> List[ContributionStrategy]:
    return [ContributionStrategy(name="", monthly_amount=3000, return_rate=20)]


class ProjectionParameters(BaseModel):
    """Inputs required to project the portfolio forward."""

    initial_return_rate: float = Field(
        6.0,
        description="Annual return rate of the current holdings, in percent.",
    )
    years: int = Field(10, ge=0, description="Number of whole years to project.")
    strategies: List[ContributionStrategy] = Field(default_factory=_default_strategies)


class YearlySnapshot(BaseModel):
    """Single row of a projection, rounded to whole units."""

    # an overflowed balance is carried as inf/nan and written as null
    model_config = ConfigDict(ser_json_inf_nan="null")

    year: int = Field(..., ge=0)
    principal: Union[int, float]
    growth: Union[int, float]
    total: Union[int, float]


class ProjectionRequest(BaseModel):
    starting_value: float = Field(..., ge=0)
    params: ProjectionParameters = Field(default_factory=ProjectionParameters)


class ProjectionResponse(BaseModel):
    snapshots: List[YearlySnapshot]
    final: YearlySnapshot
    total_monthly_contribution: float
