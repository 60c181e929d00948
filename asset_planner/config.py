"""Runtime settings for the planner API."""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    """Settings shared by the app factory and the simulation endpoints.

    Attributes:
        cors_origins: Origins allowed to call /api/*.
        simulation_workers: Worker processes per Monte Carlo batch. 1 runs serially.
        max_simulations: Largest batch the API accepts in one request.
        max_years: Longest projection or retirement horizon the API accepts.
        random_seed: Fixed seed for every request that does not bring its own.
        log_level: Root logging level name.
    """

    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    simulation_workers: int = 1
    max_simulations: int = 10000
    max_years: int = 150
    random_seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.simulation_workers < 1:
            raise ValueError("simulation_workers must be at least 1")
        if self.max_simulations < 1:
            raise ValueError("max_simulations must be at least 1")
        if self.max_years < 1:
            raise ValueError("max_years must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log_level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        origins = env.get("PLANNER_CORS_ORIGINS", "").strip()
        seed = env.get("PLANNER_RANDOM_SEED", "").strip()

        return cls(
            cors_origins=(
                tuple(o.strip() for o in origins.split(",") if o.strip())
                if origins
                else DEFAULT_CORS_ORIGINS
            ),
            simulation_workers=int(env.get("PLANNER_SIMULATION_WORKERS", "1")),
            max_simulations=int(env.get("PLANNER_MAX_SIMULATIONS", "10000")),
            max_years=int(env.get("PLANNER_MAX_YEARS", "150")),
            random_seed=int(seed) if seed else None,
            log_level=env.get("PLANNER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
