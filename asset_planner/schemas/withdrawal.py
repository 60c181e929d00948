"""Data contracts for the guardrail withdrawal simulation."""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class WithdrawalParameters(BaseModel):
    """Guyton-Klinger plan inputs; every rate is expressed as a percent."""

    initial_rate: float = Field(4.0, description="First-year withdrawal as a percent of the start.")
    upper_guardrail: float = Field(20.0, description="Capital preservation threshold.")
    lower_guardrail: float = Field(20.0, description="Prosperity threshold.")
    expected_return: float = Field(7.0, description="Mean annual market return.")
    volatility: float = Field(15.0, description="Standard deviation of the annual return.")
    simulations: int = Field(10, ge=1, description="Number of Monte Carlo runs.")
    years: int = Field(40, ge=1, description="Simulated retirement horizon.")


class GuardrailDecision(str, Enum):
    NONE = "none"
    UPPER = "upper"
    LOWER = "lower"
    INFLATION = "inflation"


class WithdrawalYearResult(BaseModel):
    # rates can be infinite when a year ends on exactly zero
    model_config = ConfigDict(ser_json_inf_nan="null")

    year: int = Field(..., ge=1)
    portfolio_value: float = Field(..., ge=0)
    withdrawal_amount: float
    withdrawal_rate: float
    return_rate: float
    inflation_adjusted: bool = False
    guardrail_triggered: Optional[Literal["upper", "lower"]] = None


class SimulationSummary(BaseModel):
    success_rate: int = Field(..., ge=0, le=100)
    median_final_value: float
    best_case: float
    worst_case: float


class SimulationBatch(BaseModel):
    """Independent runs of one plan, each ordered by year."""

    starting_value: float
    runs: List[List[WithdrawalYearResult]] = Field(default_factory=list)


class SimulationRequest(BaseModel):
    starting_value: float = Field(..., ge=0)
    params: WithdrawalParameters = Field(default_factory=WithdrawalParameters)
    seed: Optional[int] = None


class SimulationResponse(BaseModel):
    starting_value: float
    runs: List[List[WithdrawalYearResult]]
    summary: SimulationSummary
