# gradfit/config/fit_config.py
from __future__ import annotations

import math
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from gradfit.utils.errors import ConfigurationError

SolverName = Literal["vanilla", "adam", "adagrad"]
ExecutionMode = Literal["tape", "interpreted"]
TaskType = Literal["linear", "logistic"]

# linear regression defaults to adam, logistic to vanilla
DEFAULT_SOLVERS: dict[str, str] = {
    "linear": "adam",
    "logistic": "vanilla",
}


class FitConfig(BaseModel):
    """
    FitConfig

    Semantics:
    - One config == one fit call
    - Unknown keys are rejected, never ignored
    - `solver=None` resolves to the per-task default
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # solve loop
    iterations: StrictInt = Field(default=10000, ge=0)
    log_every: StrictInt = Field(default=0, ge=0)

    # solver
    solver: Optional[SolverName] = None
    learning_rate: float = 0.1
    beta1: float = Field(default=0.9, ge=0.0, lt=1.0)
    beta2: float = Field(default=0.999, ge=0.0, lt=1.0)
    epsilon: float = Field(default=1e-8, gt=0.0)

    # execution
    execution_mode: ExecutionMode = "tape"
    accelerated: bool = False

    @field_validator("learning_rate")
    @classmethod
    def _check_rate(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError(f"learning_rate must be a positive finite float, got {v}")
        return v

    def resolved_solver(self, task: str) -> str:
        if self.solver is not None:
            return self.solver
        if task not in DEFAULT_SOLVERS:
            raise ConfigurationError(
                f"unknown task {task!r}. Available: {', '.join(DEFAULT_SOLVERS)}"
            )
        return DEFAULT_SOLVERS[task]

    @classmethod
    def from_options(cls, options: "FitConfig | Mapping[str, Any] | None") -> "FitConfig":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f"options must be a FitConfig or a mapping, got {type(options).__name__}"
            )
        try:
            return cls(**options)
        except ValidationError as e:
            raise ConfigurationError(f"invalid option: {_describe(e)}") from e


def _describe(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item.get("loc", ()))
        parts.append(f"{loc}: {item.get('msg')}")
    return "; ".join(parts)
