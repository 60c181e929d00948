"""Data contracts for the full accumulate-then-withdraw pipeline."""

from typing import List, Optional

from pydantic import BaseModel, Field

from asset_planner.schemas.portfolio import Holding
from asset_planner.schemas.projection import ProjectionParameters, YearlySnapshot
from asset_planner.schemas.withdrawal import (
    SimulationSummary,
    WithdrawalParameters,
    WithdrawalYearResult,
)


class PlanRequest(BaseModel):
    holdings: List[Holding] = Field(default_factory=list)
    projection: ProjectionParameters = Field(default_factory=ProjectionParameters)
    withdrawal: WithdrawalParameters = Field(default_factory=WithdrawalParameters)
    seed: Optional[int] = None


class PlanResult(BaseModel):
    """Everything the planner produces for one request."""

    current_value: float
    total_monthly_contribution: float
    snapshots: List[YearlySnapshot]
    starting_value: float = Field(
        ...,
        description="Balance the withdrawal phase starts from.",
    )
    runs: List[List[WithdrawalYearResult]]
    summary: SimulationSummary
